"""Conversation timing and text constants."""

# Assistant text shown when inference produced no usable reply
FALLBACK_REPLY = "no response received"

# Seconds after a delete before the undo offer is presented
UNDO_OFFER_DELAY = 0.5

# Seconds after a delete during which undo is still honoured
UNDO_WINDOW = 5.0

# Seconds after starting an edit before an emptied draft restores the message
EDIT_ABANDON_TIMEOUT = 10.0

# Prefix applied to each quoted line when replying to a message
QUOTE_PREFIX = "> "
