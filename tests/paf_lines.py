"""PAF lines shared by the tests."""

REQUIRED = [
    'read1', '1200', '10', '1190', '+', 'chr1', '248956422',
    '10000', '11180', '1100', '1185', '60',
]
MINIMAL_LINE = '\t'.join(REQUIRED)

# optional columns listed in output order
FULL_LINE = '\t'.join(REQUIRED + [
    'NM:i:85', 'ms:i:1000', 'AS:i:990', 'nn:i:0', 'tp:A:P', 'cm:i:120',
    's1:i:1050', 's2:i:0', 'de:f:0.0123', 'rl:i:0',
    'MD:Z:5^AC3', 'SA:Z:chr2,100,+,50M,60,0;', 'ts:A:+', 'dv:f:0.0045',
    'cg:Z:10M2D5M', 'cs:Z::5-ac+gt*ag',
])
