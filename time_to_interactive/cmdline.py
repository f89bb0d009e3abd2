# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import argparse
import json
import logging
import os
import sys

from time_to_interactive import artifacts as artifacts_module
from time_to_interactive import audit
from time_to_interactive import config as config_module
from time_to_interactive import exceptions


DEFAULT_LOG_FORMAT = (
    '(%(levelname)s) %(asctime)s %(module)s.%(funcName)s:%(lineno)d  '
    '%(message)s')


def _SetUpLogging(verbosity):
  logging.getLogger().handlers = []
  logging.basicConfig(format=DEFAULT_LOG_FORMAT)
  if verbosity >= 2:
    logging.getLogger().setLevel(logging.DEBUG)
  elif verbosity == 1:
    logging.getLogger().setLevel(logging.INFO)
  else:
    logging.getLogger().setLevel(logging.WARNING)


def Main(argv):
  parser = argparse.ArgumentParser(
      description='Computes time to interactive from a trace and speedline '
                  'frames.')
  parser.add_argument('trace_file')
  parser.add_argument('speedline_file',
                      help='JSON list of {"progress", "timestamp"} frames.')
  parser.add_argument('--config',
                      help='JSON file overriding the scoring config.')
  parser.add_argument('-o', '--output-file')
  parser.add_argument('-v', '--verbose', action='count', default=0,
                      help='Increase verbosity level (repeat as needed).')
  args = parser.parse_args(argv)

  _SetUpLogging(args.verbose)

  if not os.path.exists(args.trace_file):
    parser.error('trace_file does not exist')
  if not os.path.exists(args.speedline_file):
    parser.error('speedline_file does not exist')

  try:
    config = None
    if args.config:
      config = config_module.ScoringConfig.FromFile(args.config)
    artifacts = artifacts_module.Artifacts.FromFiles(args.trace_file,
                                                     args.speedline_file)
  except (exceptions.Error, KeyError, ValueError) as e:
    logging.error('Could not load inputs: %s', e)
    return 255

  result = audit.Audit(artifacts, config=config)

  if args.output_file:
    ofile = open(args.output_file, 'w')
  else:
    ofile = sys.stdout
  try:
    json.dump(result.AsDict(), ofile, indent=2, sort_keys=True)
    ofile.write('\n')
  finally:
    if ofile != sys.stdout:
      ofile.close()

  if not result.succeeded:
    return 255
  return 0


def Run():
  return Main(sys.argv[1:])
