"""
SAS Verification - Emoji Table
==============================
The 64 emoji used for Short Authentication String comparison.

The index of each entry is part of the protocol: a peer derives the same
6-bit indices from the shared secret and looks them up in its own copy of
this table. Glyphs and labels may be restyled, but reordering, inserting
or removing an entry breaks code agreement with every other client.

Labels are locale-independent keys. icon_ref is an opaque handle resolved
by whatever renders the code; nothing here interprets it.
"""

import logging
import operator
import random
from typing import List, NamedTuple, Optional


logger = logging.getLogger(__name__)


EMOJI_COUNT = 64
STATIC_EMOJI_COUNT = 7


class EmojiRepresentation(NamedTuple):
    emoji: str
    description: str
    icon_ref: str

    @property
    def glyph(self):
        return self.emoji

    @property
    def label(self):
        return self.description

    def __str__(self):
        return f'{self.emoji} {self.description}'


def _entry(glyph, name, icon=None):
    return EmojiRepresentation(glyph, name, f'ic_verification_{icon or name}')


# ══════════════════════════════════════════════════
# PROTOCOL TABLE (index 0..63, order is normative)
# ══════════════════════════════════════════════════

VERIFICATION_EMOJIS = (
    _entry('🐶', 'dog'),                       # 0
    _entry('🐱', 'cat'),
    _entry('🦁', 'lion'),
    _entry('🐎', 'horse'),
    _entry('🦄', 'unicorn'),
    _entry('🐷', 'pig'),
    _entry('🐘', 'elephant'),
    _entry('🐰', 'rabbit'),
    _entry('🐼', 'panda'),                     # 8
    _entry('🐓', 'rooster'),
    _entry('🐧', 'penguin'),
    _entry('🐢', 'turtle'),
    _entry('🐟', 'fish'),
    _entry('🐙', 'octopus'),
    _entry('🦋', 'butterfly'),
    _entry('🌷', 'flower'),
    _entry('🌳', 'tree'),                      # 16
    _entry('🌵', 'cactus'),
    _entry('🍄', 'mushroom'),
    _entry('🌏', 'globe'),
    _entry('🌙', 'moon'),
    _entry('☁️', 'cloud'),
    _entry('🔥', 'fire'),
    _entry('🍌', 'banana'),
    _entry('🍎', 'apple'),                     # 24
    _entry('🍓', 'strawberry'),
    _entry('🌽', 'corn'),
    _entry('🍕', 'pizza'),
    _entry('🎂', 'cake'),
    _entry('❤️', 'heart'),
    _entry('🙂', 'smiley'),
    _entry('🤖', 'robot'),
    _entry('🎩', 'hat'),                       # 32
    _entry('👓', 'glasses'),
    _entry('🔧', 'spanner'),
    _entry('🎅', 'santa'),
    _entry('👍', 'thumbs_up'),
    _entry('☂️', 'umbrella'),
    _entry('⌛', 'hourglass'),
    _entry('⏰', 'clock'),
    _entry('🎁', 'gift'),                      # 40
    _entry('💡', 'light_bulb'),
    _entry('📕', 'book'),
    _entry('✏️', 'pencil'),
    _entry('📎', 'paperclip'),
    _entry('✂️', 'scissors'),
    _entry('🔒', 'lock'),
    _entry('🔑', 'key'),
    _entry('🔨', 'hammer'),                    # 48
    _entry('☎️', 'telephone', icon='phone'),
    _entry('🏁', 'flag'),
    _entry('🚂', 'train'),
    _entry('🚲', 'bicycle'),
    _entry('✈️', 'aeroplane'),
    _entry('🚀', 'rocket'),
    _entry('🏆', 'trophy'),
    _entry('⚽', 'ball'),                      # 56
    _entry('🎸', 'guitar'),
    _entry('🎺', 'trumpet'),
    _entry('🔔', 'bell'),
    _entry('⚓', 'anchor'),
    _entry('🎧', 'headphones'),
    _entry('📁', 'folder'),
    _entry('📌', 'pin'),                       # 63
)


def emoji_for_code(code):
    """
    Look up the emoji for a SAS index.

    The index is reduced modulo 64 first, so every integer maps to an entry
    (Python's % already yields 0..63 for negative operands). Callers slicing
    6-bit groups never leave that range anyway. Any integer type is
    accepted (e.g. numpy ints); floats, strings and bools are not.
    """
    if isinstance(code, bool):
        raise TypeError('Emoji code must be an int, got bool')
    try:
        index = operator.index(code)
    except TypeError:
        raise TypeError(f'Emoji code must be an int, got {type(code).__name__}') from None
    return VERIFICATION_EMOJIS[index % EMOJI_COUNT]


def all_verification_emojis() -> List[EmojiRepresentation]:
    """Full pool in protocol order, as a new list."""
    return list(VERIFICATION_EMOJIS)


def random_static_emojis(count: int = STATIC_EMOJI_COUNT,
                         rng: Optional[random.Random] = None) -> List[EmojiRepresentation]:
    """
    Pick `count` distinct emoji for an illustrative preview.

    NOT derived from any shared secret and NOT suitable for verification:
    this only shows users what an emoji code looks like.
    """
    if not 0 <= count <= EMOJI_COUNT:
        raise ValueError(f'count must be between 0 and {EMOJI_COUNT}, got {count}')
    sampler = rng if rng is not None else random
    picked = sampler.sample(VERIFICATION_EMOJIS, count)
    logger.debug('Picked %d static preview emoji', count)
    return picked
