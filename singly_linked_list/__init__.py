from .list_defs import *
from .txt_strs import *
from .linked_list import *
