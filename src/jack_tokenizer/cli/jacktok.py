"""
jacktok - Jack Tokenizer Command-Line Interface
===============================================

This module implements the command-line interface for the Jack tokenizer.
It reads one Jack source file and writes its token stream as XML.

Usage Examples
--------------
Basic tokenization (writes MainT.xml next to the source):
    $ jacktok Main.jack

With output file:
    $ jacktok Main.jack -o tokens.xml

Print to the terminal instead of a file:
    $ jacktok Main.jack --stdout

Prompt for the source path:
    $ jacktok
    Enter file path: Main.jack

Verbose mode:
    $ jacktok -v Main.jack
"""

import logging
from pathlib import Path
from typing import Optional

import click

from jack_tokenizer import __version__
from jack_tokenizer.cli.errors import handle_cli_exception
from jack_tokenizer.config import TokenizerConfig
from jack_tokenizer.serialize import tokens_to_xml
from jack_tokenizer.tokenizer import tokenize_file


def prompt_for_path() -> Path:
    """
    Ask for the source path on stderr and read one line from stdin.

    The prompt goes to stderr so that ``--stdout`` output stays a clean XML
    document.
    """
    click.echo("Enter file path: ", err=True, nl=False)
    answer = click.get_text_stream("stdin").readline().strip()
    if not answer:
        raise click.BadParameter("no file path given", param_hint="INPUT_FILE")
    return Path(answer)


def setup_logging(config: TokenizerConfig, verbose: bool) -> None:
    """Configure logging based on verbosity and the configured level."""
    level = logging.DEBUG if verbose else config.log_level_number
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output XML file (default: <input stem>T.xml)",
)
@click.option(
    "--stdout", "to_stdout",
    is_flag=True,
    help="Write the XML to standard output instead of a file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the file ends inside a block comment or string literal",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="jacktok")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    to_stdout: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a Jack source file into XML.

    INPUT_FILE is the Jack source file (.jack). When omitted, the path is
    read from standard input.

    \b
    Examples:
        jacktok Main.jack               # Outputs MainT.xml
        jacktok Main.jack -o out.xml    # Specify output file
        jacktok Main.jack --stdout      # Print tokens
    """
    config = TokenizerConfig.from_env()
    if strict:
        config.strict_eof = True
    setup_logging(config, verbose)

    try:
        if input_file is None:
            input_file = prompt_for_path()

        if verbose:
            click.echo(f"Tokenizing {input_file}...", err=to_stdout)

        tokens = tokenize_file(input_file, config)
        document = tokens_to_xml(tokens)

        if to_stdout:
            click.echo(document, nl=False)
            return

        if output is None:
            output = config.output_path_for(input_file)
        output.write_text(document, encoding=config.encoding)

        if verbose:
            click.echo(f"Wrote {len(tokens)} tokens to {output}")

        click.echo(f"Tokenized {input_file} -> {output}")

    except click.Abort:
        raise
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
