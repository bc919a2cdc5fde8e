#------------------------------
"""
:py:class:`VolPaths` - look-up table of geometry volume paths for alignable volumes
===================================================================================

Usage::

    import alipy.steer.VolPaths as vp
    import alipy.steer.AlignConstants as ac

    vp.init_vol_paths()                  # done once per process, next calls do nothing
    path = vp.get_vol_path(ac.SPD1, 5)   # 'ALIC_1/ITSV_1/ITSD_1/IT12_1/I12B_1/I10B_2/I107_2/I101_1/ITS1_1'
    paths = vp.get_layer_paths(ac.SDD2)  # tuple of 176 paths

The table is static: it is created on the first call of init_vol_paths()
(the first alignment object instance calls it) and is read-only afterwards.
Layers without path templates have no paths and get_vol_path returns None.
"""
#------------------------------

from itertools import product

import alipy.steer.AlignConstants as ac

import logging
logger = logging.getLogger(__name__)

#------------------------------

# (layer, path template with one {} per copy-number level, number of copies per level)
# copy numbers start from 1, the last level runs fastest.

VOLPATH_TEMPLATES = (
    (ac.SPD1, 'ALIC_1/ITSV_1/ITSD_1/IT12_1/I12B_{}/I10B_{}/I107_{}/I101_1/ITS1_1', (10, 2, 4)),
    (ac.SPD2, 'ALIC_1/ITSV_1/ITSD_1/IT12_1/I12B_{}/I20B_{}/I1D7_{}/I1D1_1/ITS2_1', (10, 4, 4)),
    (ac.SDD1, 'ALIC_1/ITSV_1/ITSD_1/IT34_1/I004_{}/I302_{}/ITS3_1',                (14, 6)),
    (ac.SDD2, 'ALIC_1/ITSV_1/ITSD_1/IT34_1/I005_{}/I402_{}/ITS4_1',                (22, 8)),
    (ac.SSD1, 'ALIC_1/ITSV_1/ITSD_1/IT56_1/I565_{}/I562_{}/ITS5_1',                (34, 22)),
    (ac.SSD2, 'ALIC_1/ITSV_1/ITSD_1/IT56_1/I569_{}/I566_{}/ITS6_1',                (38, 25)),
)

_vol_paths = None

#------------------------------

def expand_template(template, ncopies) :
    """Returns list of paths for all combinations of copy numbers.
    """
    ranges = [range(1, n+1) for n in ncopies]
    return [template.format(*copies) for copies in product(*ranges)]


def init_vol_paths() :
    """Initializes the process-wide look-up table, does nothing if it is already initialized.
    """
    global _vol_paths
    if _vol_paths is not None : return

    d = dict((layer, (None,)*ac.layer_size(layer)) for layer in ac.list_layer_ids)

    for layer, template, ncopies in VOLPATH_TEMPLATES :
        paths = expand_template(template, ncopies)
        size = ac.layer_size(layer)
        if len(paths) != size :
            logger.warning('layer %s: number of paths %d is not equal to the layer size %d'%\
                           (ac.dic_layer_id_to_key[layer], len(paths), size))
        d[layer] = tuple(paths)

    _vol_paths = d
    logger.debug('volume path table is initialized for %d layers' % len(VOLPATH_TEMPLATES))


def is_initialized() :
    return _vol_paths is not None


def get_vol_path(layer, module) :
    """Returns (str) volume path for layer and module or None if not available.
    """
    init_vol_paths()
    paths = _vol_paths.get(layer, None)
    if paths is None or module < 0 or module >= len(paths) : return None
    return paths[module]


def get_layer_paths(layer) :
    """Returns tuple of paths for all modules of the layer, empty tuple for unknown layer.
    """
    init_vol_paths()
    return _vol_paths.get(layer, ())


def find_vol_path(path) :
    """Returns (layer, module) for known volume path or None.
    """
    init_vol_paths()
    for layer, paths in _vol_paths.items() :
        if path in paths :
            return layer, paths.index(path)
    return None

#------------------------------

if __name__ == "__main__" :
    logging.basicConfig(format='[%(levelname).1s] L%(lineno)04d: %(message)s', level=logging.DEBUG)
    for layer in ac.list_layer_ids :
        print('%-6s %s' % (ac.dic_layer_id_to_key[layer], get_vol_path(layer, 0)))

# EOF
