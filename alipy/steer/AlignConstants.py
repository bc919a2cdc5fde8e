#------------------------------
"""
:py:class:`AlignConstants` - global constants for alignable volumes
===================================================================

Usage ::

    import alipy.steer.AlignConstants as ac

    for layer in ac.list_layer_ids : print('%2d %5d  %s' % (layer, ac.layer_size(layer), ac.layer_name(layer)))

Volume unique identifier (UID) is 16 bits, first 5 reserved for the layer ID
(32 possible values), remaining 11 for the module ID inside the layer
(2048 possible values).

See:
 * :py:class:`AlignObj`
 * :py:class:`VolPaths`
"""
#------------------------------

# UID bit layout

LAYER_BITS  = 5
MODULE_BITS = 11
LAYER_MASK  = (1 << LAYER_BITS) - 1   # 0x1f
MODULE_MASK = (1 << MODULE_BITS) - 1  # 0x7ff
MAX_LAYER   = LAYER_MASK
MAX_MODULE  = MODULE_MASK

# Enumerated layers

INVALID_LAYER = 0
FIRST_LAYER   = 1
SPD1  = 1
SPD2  = 2
SDD1  = 3
SDD2  = 4
SSD1  = 5
SSD2  = 6
TPC1  = 7
TPC2  = 8
TRD1  = 9
TRD2  = 10
TRD3  = 11
TRD4  = 12
TRD5  = 13
TRD6  = 14
TOF   = 15
PHOS1 = 16
PHOS2 = 17
RICH  = 18
MUON  = 19
LAST_LAYER = 20

layer_tuple = (
    (SPD1,  'SPD1',  80,  'ITS inner pixels layer'),
    (SPD2,  'SPD2',  160, 'ITS outer pixels layer'),
    (SDD1,  'SDD1',  84,  'ITS inner drifts layer'),
    (SDD2,  'SDD2',  176, 'ITS outer drifts layer'),
    (SSD1,  'SSD1',  748, 'ITS inner strips layer'),
    (SSD2,  'SSD2',  950, 'ITS outer strips layer'),
    (TPC1,  'TPC1',  36,  'TPC inner chambers layer'),
    (TPC2,  'TPC2',  36,  'TPC outer chambers layer'),
    (TRD1,  'TRD1',  90,  'TRD chambers layer 1'),
    (TRD2,  'TRD2',  90,  'TRD chambers layer 2'),
    (TRD3,  'TRD3',  90,  'TRD chambers layer 3'),
    (TRD4,  'TRD4',  90,  'TRD chambers layer 4'),
    (TRD5,  'TRD5',  90,  'TRD chambers layer 5'),
    (TRD6,  'TRD6',  90,  'TRD chambers layer 6'),
    (TOF,   'TOF',   1,   'TOF layer'),
    (PHOS1, 'PHOS1', 1,   '?'),
    (PHOS2, 'PHOS2', 1,   '?'),
    (RICH,  'RICH',  7,   'RICH layer'),
    (MUON,  'MUON',  1,   '?'),
)

list_layer_ids   = [rec[0] for rec in layer_tuple]
list_layer_keys  = [rec[1] for rec in layer_tuple]
list_layer_sizes = [rec[2] for rec in layer_tuple]
list_layer_names = [rec[3] for rec in layer_tuple]

dic_layer_id_to_key   = dict(zip(list_layer_ids, list_layer_keys))
dic_layer_key_to_id   = dict(zip(list_layer_keys, list_layer_ids))
dic_layer_id_to_size  = dict(zip(list_layer_ids, list_layer_sizes))
dic_layer_id_to_name  = dict(zip(list_layer_ids, list_layer_names))

#------------------------------

def is_valid_layer(layer) :
    return FIRST_LAYER <= layer < LAST_LAYER

def layer_size(layer) :
    """Returns number of modules in the layer, 0 for unknown layer.
    """
    return dic_layer_id_to_size.get(layer, 0)

def layer_name(layer) :
    """Returns human-readable layer name, 'Invalid Layer' for unknown layer.
    """
    return dic_layer_id_to_name.get(layer, 'Invalid Layer')

def layer_id(key) :
    """Returns layer id for short name like 'SPD1' or 'spd1', or for integer-like input.
    """
    if isinstance(key, str) and not key.isdigit() :
        lid = dic_layer_key_to_id.get(key.upper(), None)
        if lid is None : raise ValueError('unknown layer name "%s", expected one of %s' % (key, ', '.join(list_layer_keys)))
        return lid
    return int(key)

#------------------------------

if __name__ == "__main__" :
    for layer in list_layer_ids :
        print('%2d %-6s %5d  %s' % (layer, dic_layer_id_to_key[layer], layer_size(layer), layer_name(layer)))

# EOF
