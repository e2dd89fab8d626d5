MAX_CMD_LENGTH = 1000
MAX_ARGS = 100

DEFAULT_PROMPT = "$ "
# a command name containing this is a literal path, not a PATH lookup
PATH_SEPARATOR = "/"
