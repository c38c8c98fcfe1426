TERMINAL_TXT = "null"
LINK_TXT = " -> "
NODE_FMT = "({})"

TXTS = {
    "index_range": "{op}: index {index} out of range 0..{upper}",
    "index_empty": "{op}: index {index} out of range, list is empty",
    "index_type": "{op}: index must be int, got {kind}",
    "empty": "{op}: list is empty",
}
