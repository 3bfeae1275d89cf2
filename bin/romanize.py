#!/usr/bin/env python

import logging
import sys

from cli_command_parser import Command, Positional, Option, Counter, main, inputs

log = logging.getLogger(__name__)


class Romanize(Command, description='Romanize Korean text based on the National Institute of Korean Language rules'):
    text = Positional(nargs='*', help='Korean text to romanize (default: read from --input or stdin)')
    input = Option('-i', type=inputs.File(allow_dash=True, encoding='utf-8'), help='A file containing text to romanize')
    verbose = Counter('-v', help='Increase logging verbosity (can specify multiple times)')

    def _init_command_(self):
        from kogrammar.logging import init_logging

        init_logging(self.verbose)

    def main(self):
        from kogrammar import romanize

        if self.text:
            print(romanize(' '.join(self.text)))
            return

        data = self.input.read() if self.input else sys.stdin.read()
        log.debug(f'Read {len(data):,d} characters')
        for line in data.splitlines():
            print(romanize(line))


if __name__ == '__main__':
    main()
