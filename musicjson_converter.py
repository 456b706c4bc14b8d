''' A script for converting music scores between MusicXML and MusicJSON (stored as JSON or YAML) '''

# Imports
import os
import sys
import logging
import argparse
import datetime
import xml.etree.ElementTree as xml
from typing import Final

import yaml

from musicjson import __version__ as CURRENT_VERSION
from musicjson.MusicJSON import *

# Create ANSI formatting for terminal messages
# ANSI COLORS: https://talyian.github.io/ansicolors/
# TERMINAL TEXT COLORS
RED        : Final = '\x1b[31m'
YELLOW_229 : Final = '\x1b[38;5;229m'
BLUE_39    : Final = '\x1b[38;5;39m'
GRAY_245   : Final = '\x1b[38;5;245m'
GRAY_248   : Final = '\x1b[38;5;248m'
GREEN_79   : Final = '\x1b[38;5;79m'

# TERMINAL TEXT STYLES
BOLD      : Final = '\x1b[1m'
RESET     : Final = '\x1b[0m' # Resets all text styles and colors

# Argument Parser
def parse_args(argv=None):
  parser = argparse.ArgumentParser(
    formatter_class=argparse.RawDescriptionHelpFormatter,
    usage=f'{GRAY_248}[>_]{RESET} {YELLOW_229}python{RESET} {BLUE_39}{os.path.basename(sys.argv[0])}{RESET} {GRAY_245}[-h]{RESET} {BLUE_39}file [files ...]{RESET} {GRAY_245}[-o {{json, yaml}}] [--indent N] [--pretty] [-v]{RESET}',
    description='''This script converts music scores between MusicXML and MusicJSON.'''
  )

  parser.add_argument(
    'files',
    nargs='+',
    help="MusicXML files (.xml, .musicxml) or MusicJSON files (.json, .yaml, .yml)"
  )
  parser.add_argument(
    '-o',
    '--output',
    choices=['json', 'yaml'],
    default='json',
    help="specifies the output type when converting from MusicXML files (defaults to json)"
  )
  parser.add_argument(
    '--indent',
    type=int,
    default=2,
    help="indentation of JSON output (defaults to 2)"
  )
  parser.add_argument(
    '--pretty',
    action='store_true',
    help="indent the written MusicXML"
  )
  parser.add_argument(
    '-v',
    '--verbose',
    action='store_true',
    help="print debug messages of the converter"
  )
  parser.add_argument(
    '--version',
    action='version',
    version=f'%(prog)s {CURRENT_VERSION}'
  )

  return parser.parse_args(argv)

# Create date for the output filenames
DATE_FILENAME = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")

''' Helper Functions '''
def get_mode(file: str) -> str:
  extension = os.path.splitext(file)[1].lower()

  if extension in XML_SUFFIXES:
    return 'xml'
  elif extension in JSON_SUFFIXES + YAML_SUFFIXES:
    return 'json'

  return ''

def convert_file(file: str, args) -> str:
  filename = os.path.basename(os.path.splitext(file)[0])
  mode = get_mode(file)

  if mode == 'xml':
    ''' From MusicXML '''
    music = load_music_xml(file)
    output = f'{filename}_{DATE_FILENAME}.{args.output}'
    save_music_json(music, output, args.output, args.indent)

  elif mode == 'json':
    ''' From MusicJSON '''
    music = load_music_json(file)
    output = f'{filename}_{DATE_FILENAME}.xml'
    save_music_xml(music, output, args.pretty)

  else:
    raise ValueError(f"Unsupported file type: {os.path.splitext(file)[1]}")

  return output

''' Main Function '''
def main(argv=None) -> int:
  args = parse_args(argv)

  if args.verbose:
    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

  status = 0
  for file in args.files:
    try:
      output = convert_file(file, args)
    except (OSError, ValueError, xml.ParseError, yaml.YAMLError) as e:
      print(f"{RED}Error:{RESET} could not convert {BOLD}{file}{RESET}: {e}")
      status = 1
      continue

    print(f"{GREEN_79}Converted{RESET} {file} {GRAY_245}->{RESET} {BOLD}{output}{RESET}")

  return status

if __name__ == '__main__':
  sys.exit(main())
