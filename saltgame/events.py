"""
Meeting scene events.

Published on the world's EventBus:

    DIALOGUE_STARTED  character_id, line_index
    LINE_ADVANCED     character_id, line_index
    DIALOGUE_ENDED    character_id
    CHARACTER_MET     character_id, met_count
    STAGE_ADVANCED    stage
"""

from enum import Enum, auto


class MeetingEvent(Enum):
    DIALOGUE_STARTED = auto()
    LINE_ADVANCED = auto()
    DIALOGUE_ENDED = auto()
    CHARACTER_MET = auto()
    STAGE_ADVANCED = auto()
