import logging

FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = "calcparse.log"
LOG_LEVEL = logging.INFO

PROMPT = "> "
QUIT_COMMANDS = {"quit", "q"}

MAX_NESTING_DEPTH = 200
