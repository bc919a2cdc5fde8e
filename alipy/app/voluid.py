"""
Command voluid - volume UID codec, volume paths and Euler angles of alignable volumes
"""

import sys

import logging
logger = logging.getLogger(__name__)
from alipy.logger import config_logger, level_from_name, STR_LEVEL_NAMES
SCRNAME = sys.argv[0].rsplit('/')[-1]

import alipy.steer.AlignConstants as ac
import alipy.steer.VolPaths as vp
from alipy.steer.AlignObj import layer_to_voluid, voluid_to_layer_and_module, angles_to_matrix, matrix_to_angles

MODES = ('encode', 'decode', 'path', 'layers', 'angles')

USAGE = '\nCommand: voluid <mode> [options]'\
    '\n              modes: %s\n'%(', '.join(MODES))\
  + '\nExamples:\n'\
    '  voluid -h\n'\
    '  voluid encode -L SPD1 -m 5\n'\
    '  voluid encode -L 3 -m 17\n'\
    '  voluid decode -u 2053\n'\
    '  voluid path -L SSD2 -m 949\n'\
    '  voluid layers\n'\
    '  voluid angles -a 1,2,3 -l DEBUG'


def argument_parser():
    from argparse import ArgumentParser

    d_mode     = 'layers'
    d_layer    = 'SPD1'
    d_module   = 0
    d_voluid   = None
    d_angles   = '0,0,0'
    d_loglevel = 'INFO'

    h_mode     = 'mode, one of %s, default = %s' % (str(MODES), d_mode)
    h_layer    = 'layer id or name (%s), default = %s' % (', '.join(ac.list_layer_keys), d_layer)
    h_module   = 'module number in the layer, default = %d' % d_module
    h_voluid   = 'volume UID, default = %s' % str(d_voluid)
    h_angles   = 'comma-separated Euler angles psi,theta,phi [degree], default = %s' % d_angles
    h_loglevel = 'logging level from list (%s), default = %s' % (STR_LEVEL_NAMES, d_loglevel)

    parser = ArgumentParser(description='Volume UID codec for alignable volumes', usage=USAGE)

    parser.add_argument('mode', nargs='?',  default=d_mode,     type=str, help=h_mode)
    parser.add_argument('-L', '--layer',    default=d_layer,    type=str, help=h_layer)
    parser.add_argument('-m', '--module',   default=d_module,   type=int, help=h_module)
    parser.add_argument('-u', '--voluid',   default=d_voluid,   type=int, help=h_voluid)
    parser.add_argument('-a', '--angles',   default=d_angles,   type=str, help=h_angles)
    parser.add_argument('-l', '--loglevel', default=d_loglevel, type=str, help=h_loglevel)

    return parser


def info_layers():
    s = '%5s %-6s %6s  %s' % ('layer', 'name', 'size', 'description')
    for layer in ac.list_layer_ids:
        s += '\n%5d %-6s %6d  %s' % (layer, ac.dic_layer_id_to_key[layer], ac.layer_size(layer), ac.layer_name(layer))
    return s


def info_voluid(voluid):
    layer, module = voluid_to_layer_and_module(voluid)
    return 'voluid: %d (0x%04x) layer: %d (%s) module: %d path: %s'%\
           (voluid, voluid, layer, ac.dic_layer_id_to_key.get(layer, '?'), module, vp.get_vol_path(layer, module))


def info_angles(angles):
    rot = angles_to_matrix(angles)
    s = 'angles psi, theta, phi [degree]: %s' % ', '.join('%.6f' % a for a in angles)
    for row in range(3):
        s += '\n%12.6f%12.6f%12.6f' % tuple(rot[3*row:3*row+3])
    back = matrix_to_angles(rot)
    s += '\nangles from matrix: %s' % ('degenerated matrix' if back is None else ', '.join('%.6f' % a for a in back))
    return s


def voluid(args):
    mode = args.mode
    if mode == 'layers':
        return info_layers()
    if mode == 'decode':
        if args.voluid is None: raise ValueError('mode decode requires -u <voluid>')
        return info_voluid(args.voluid)
    if mode == 'angles':
        angles = [float(v) for v in args.angles.split(',')]
        if len(angles) != 3: raise ValueError('expected 3 comma-separated angles, got "%s"' % args.angles)
        return info_angles(angles)
    layer = ac.layer_id(args.layer)
    if mode == 'encode':
        return info_voluid(layer_to_voluid(layer, args.module))
    if mode == 'path':
        return str(vp.get_vol_path(layer, args.module))
    raise ValueError('unknown mode "%s", expected one of %s' % (mode, str(MODES)))


def do_main():
    parser = argument_parser()
    args = parser.parse_args()
    if level_from_name(args.loglevel) is None:
        parser.error('unknown logging level "%s", expected one of %s' % (args.loglevel, STR_LEVEL_NAMES))
    config_logger(loglevel=args.loglevel, fmt='[%(levelname).1s] %(name)s L%(lineno)04d: %(message)s')
    logger.debug('%s parameters: %s' % (SCRNAME, str(vars(args))))
    try:
        print(voluid(args))
    except ValueError as err:
        sys.exit('%s: %s' % (SCRNAME, err))


if __name__ == "__main__":
    do_main()
    sys.exit(0)

# EOF
