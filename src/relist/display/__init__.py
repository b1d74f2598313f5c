"""Display layer — where change notifications go.

Reference sinks and a fan-out broadcaster for hosts that need more than
one consumer of a store's change stream.
"""

from relist.display.broadcaster import ChangeBroadcaster
from relist.display.sink import ChangeSink, MirrorSink, NullSink, RecordingSink

__all__ = [
    "ChangeBroadcaster",
    "ChangeSink",
    "MirrorSink",
    "NullSink",
    "RecordingSink",
]
