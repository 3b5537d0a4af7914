"""State layer.

This package owns everything the tick driver mutates: rolling histories,
the snapshot mailbox shared with the poll driver, fusion of snapshots into
the live state, and alert evaluation.
"""
