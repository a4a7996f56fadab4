from __future__ import annotations

import argparse
import sys
import textwrap
from functools import partial
from typing import Sequence

from brailletrans import PLACEHOLDER, EmptyInputError, TranslationOptions, classify, translate


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="brailletrans",
        description="Translate between English text and six-dot Braille cell notation.",
        usage=textwrap.dedent(
            """
            Translate English to Braille cells, or Braille cells back to English.
            The direction is detected from the input: text made only of 'O', '.'
            and spaces is read as Braille.

              Examples:

                Translate English to Braille:
                $ brailletrans Hello world

                # Translate Braille back to English:
                $ brailletrans ..... O.OO.. O..O..

                # Keep the gaps between words when reading Braille:
                $ brailletrans -w "O.....  O.O..."
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="The text to translate. Multiple arguments are joined with single spaces.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="End number mode at word gaps and at letters without a digit when reading Braille",
    )
    parser.add_argument(
        "-w",
        "--word-spaces",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Read a double space between Braille cells as a space between words",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    text = " ".join(args.text)
    options = TranslationOptions(strict=args.strict, word_spaces=args.word_spaces)

    try:
        log(f"Detected {classify(text).value} input")
        result = translate(text, options)
    except EmptyInputError:
        print("Please provide a string to translate.")
        return

    log(f"Options: strict={options.strict}, word_spaces={options.word_spaces}")
    log(f"Unrecognized symbols: {result.count(PLACEHOLDER)}")
    print(result)


if __name__ == "__main__":
    main()
