class InvalidFieldPath(ValueError):
    """
    Throw an exception when a field path cannot address any leaf of a resume document,
    e.g. an unknown section, a field the section does not have, or a negative index.
    """


class PersistenceUnavailable(Exception):
    """
    Throw an exception when the durable key-value storage cannot be reached at all.
    """
