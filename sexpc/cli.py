#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from .core.pipeline import CompilerConfig, DriverStatus, INTERACTIVE_PROMPT, Session, compile_file
from .utils.colors import Colors, set_verbose
from .utils.term import print_error, print_symbols

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_INVALID_TOPLEVEL = 2
EXIT_NOT_FOUND = 3


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')


def build_config(args) -> CompilerConfig:
    config = CompilerConfig()
    config.int_width = args.int_width
    config.module_name = args.module_name
    config.verbose = args.verbose
    if args.interactive or (args.input == '-' and sys.stdin.isatty()):
        config.prompt = INTERACTIVE_PROMPT
    return config


def main(argv=None):
    parser = argparse.ArgumentParser(prog='sexpc', description='Compile S-expression source to LLVM IR')
    parser.add_argument('input', nargs='?', default='-', help="Input file, or '-' to read standard input")
    parser.add_argument('-o', '--output', help='Write the LLVM IR module here instead of standard output')
    parser.add_argument('--int-width', type=int, default=32, help='Bit width of integer constants')
    parser.add_argument('--module-name', default='sexpc', help='Name of the generated LLVM module')
    parser.add_argument('--dump-ast', action='store_true', help='Print each parsed top-level form')
    parser.add_argument('--symbols', action='store_true', help='Print the symbol environment after compiling')
    parser.add_argument('--no-ir', action='store_true', help='Do not print the generated module')
    parser.add_argument('-i', '--interactive', action='store_true', help="Show the 'ready> ' prompt")
    parser.add_argument('--minimal', action='store_true', help='Plain output without colors or tables')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    set_verbose(args.verbose)
    if args.minimal:
        Colors.MINIMAL = True

    config = build_config(args)
    if args.input == '-':
        session = Session(config)
        session.run(sys.stdin, '<stdin>')
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print_error(f"File not found: {input_path}")
            return EXIT_NOT_FOUND
        session = compile_file(str(input_path), config)

    if args.dump_ast:
        for form in session.forms:
            print(form.to_sexpr())

    ir_text = session.emit()
    if not args.no_ir and ir_text is not None:
        if args.output:
            write_output(Path(args.output), ir_text)
        else:
            sys.stdout.write(ir_text)

    if args.symbols:
        print_symbols(session.environment, title='Environment')

    if session.status == DriverStatus.INVALID_TOPLEVEL:
        return EXIT_INVALID_TOPLEVEL
    if session.diagnostics.has_errors():
        return EXIT_DIAGNOSTICS
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
