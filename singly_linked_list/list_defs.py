NOT_FOUND = -1 # find() result when no node matches.

####################################################################################
class LinkedListError(Exception):
    """Base class for errors raised by LinkedList."""
    pass

class IndexOutOfBounds(LinkedListError, IndexError):
    """Raised when an index falls outside an operation's valid range."""
    pass

class EmptyListError(LinkedListError, IndexError):
    """Raised by pop, head and tail on a list with no nodes."""
    pass

