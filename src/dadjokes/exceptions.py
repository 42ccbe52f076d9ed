class InitFailedException(Exception):
    pass
