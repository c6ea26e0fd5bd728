import logging
from sys import stdout
from typing import Callable

import calcparse.constants as cst
from calcparse.extra.exceptions import ParseError
from calcparse.parser import Parser

logger = logging.getLogger(__name__)


def main(parser: Parser | None = None, read_line: Callable[[str], str] = input):
    """
    Entry point for application. Reads expressions from stdin one line at a time and logs their tree
    in call form, or the reason they could not be parsed
    :param parser: parser to use
    :param read_line: source of lines, 'input' by default
    """
    parser = parser or Parser()
    while True:
        try:
            expression: str = read_line(cst.PROMPT).strip()
        except EOFError:
            break
        if expression.lower() in cst.QUIT_COMMANDS:
            break
        if not expression:
            continue

        try:
            result = parser.parse(expression)
        except ParseError as e:
            logger.error(f"Could not parse expression {expression}: {e}")
            continue
        logger.info(f"{expression} => {result}")


def run():
    logging.basicConfig(
        level=cst.LOG_LEVEL,
        handlers=[
            logging.FileHandler(cst.LOG_FILE, mode="a", encoding="utf-8"),
            logging.StreamHandler(stdout),
        ],
        format=cst.FORMAT
    )
    main()


if __name__ == "__main__":
    run()
