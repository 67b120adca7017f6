import argparse
import logging
import os

from .gltf import create_glb, create_gltf, to_embedded_gltf
from .logging_config import setup_logging
from .mesh_io import load_mesh
from .options import GltfOptions, load_options
from .samples import create_cube_mesh

def main(argv=None):
  argParser = argparse.ArgumentParser(prog='meshgltf', description='Convert triangle meshes to glTF 2.0')

  subparsers = argParser.add_subparsers(dest='task', help='command')
  subparsers.required = True

  createParser = subparsers.add_parser('create', help='convert a YAML mesh description to .glb, or .gltf with an embedded buffer')
  createParser.add_argument('mesh', help='The YAML mesh description to convert.')
  addOutputArguments(createParser)
  createParser.set_defaults(func=create)

  cubeParser = subparsers.add_parser('cube', help='write a sample unit cube')
  cubeParser.add_argument('--color', nargs=4, type=float, metavar=('R', 'G', 'B', 'A'), help='Flat base color of the cube, each component in [0, 1].')
  addOutputArguments(cubeParser)
  cubeParser.set_defaults(func=cube)

  args = argParser.parse_args(argv)
  setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
  args.func(args)

def addOutputArguments(parser):
  parser.add_argument('-o', '--output', required=True, help='The file to write. A .gltf extension writes JSON with the buffer embedded as a data URI, anything else writes binary glTF.')
  parser.add_argument('--config', help='A YAML file with options (useBatchIds, relativeToCenter, deprecated, upAxis). Flags given on the command line take precedence.')
  parser.add_argument('--no-batch-ids', dest='useBatchIds', action='store_false', default=None, help='Do not write the batch id vertex attribute.')
  parser.add_argument('--relative-to-center', dest='relativeToCenter', action='store_true', default=None, help='Store positions relative to the mesh center and add the CESIUM_RTC extension.')
  parser.add_argument('--deprecated', dest='deprecated', action='store_true', default=None, help='Use the old BATCHID semantic instead of _BATCHID.')
  parser.add_argument('--up-axis', dest='upAxis', choices=('Y', 'Z'), help='The up-axis of the glTF model. Defaults to Y.')
  parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output.')

def resolveOptions(args):
  options = load_options(args.config) if args.config else GltfOptions()
  return options.merged(
    use_batch_ids=args.useBatchIds,
    relative_to_center=args.relativeToCenter,
    deprecated=args.deprecated,
    up_axis=args.upAxis
  )

def create(args):
  write(load_mesh(args.mesh), resolveOptions(args), args.output)

def cube(args):
  write(create_cube_mesh(args.color), resolveOptions(args), args.output)

def write(mesh, options, output):
  directory = os.path.dirname(output)
  if directory:
    os.makedirs(directory, exist_ok=True)

  if output.lower().endswith('.gltf'):
    gltf = to_embedded_gltf(create_gltf(mesh, options))
    gltf.save_json(output)
  else:
    with open(output, 'wb') as f:
      f.write(create_glb(mesh, options))

  print('glTF written to ' + output)
