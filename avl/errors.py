class EmptyTree(Exception):
    """no values stored"""
