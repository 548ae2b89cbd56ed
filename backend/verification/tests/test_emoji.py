"""Tests for the SAS emoji table and static preview sampling."""
import random

from django.test import SimpleTestCase

from verification.emoji import (
    EMOJI_COUNT,
    VERIFICATION_EMOJIS,
    EmojiRepresentation,
    all_verification_emojis,
    emoji_for_code,
    random_static_emojis,
)


class EmojiTableTests(SimpleTestCase):
    """Table integrity: the index -> emoji mapping is shared with every peer."""

    def test_table_has_64_entries(self):
        self.assertEqual(len(VERIFICATION_EMOJIS), 64)
        self.assertEqual(EMOJI_COUNT, 64)

    def test_no_duplicate_glyphs(self):
        glyphs = [e.emoji for e in VERIFICATION_EMOJIS]
        self.assertEqual(len(set(glyphs)), 64)

    def test_no_duplicate_labels(self):
        labels = [e.description for e in VERIFICATION_EMOJIS]
        self.assertEqual(len(set(labels)), 64)

    def test_no_duplicate_icons(self):
        icons = [e.icon_ref for e in VERIFICATION_EMOJIS]
        self.assertEqual(len(set(icons)), 64)

    def test_known_positions(self):
        self.assertEqual(VERIFICATION_EMOJIS[0], EmojiRepresentation('🐶', 'dog', 'ic_verification_dog'))
        self.assertEqual(VERIFICATION_EMOJIS[21].description, 'cloud')
        self.assertEqual(VERIFICATION_EMOJIS[36].description, 'thumbs_up')
        self.assertEqual(VERIFICATION_EMOJIS[49].description, 'telephone')
        self.assertEqual(VERIFICATION_EMOJIS[49].icon_ref, 'ic_verification_phone')
        self.assertEqual(VERIFICATION_EMOJIS[63], EmojiRepresentation('📌', 'pin', 'ic_verification_pin'))

    def test_label_order(self):
        # Full protocol order; a change here is a protocol break.
        expected = [
            'dog', 'cat', 'lion', 'horse', 'unicorn', 'pig', 'elephant', 'rabbit',
            'panda', 'rooster', 'penguin', 'turtle', 'fish', 'octopus', 'butterfly', 'flower',
            'tree', 'cactus', 'mushroom', 'globe', 'moon', 'cloud', 'fire', 'banana',
            'apple', 'strawberry', 'corn', 'pizza', 'cake', 'heart', 'smiley', 'robot',
            'hat', 'glasses', 'spanner', 'santa', 'thumbs_up', 'umbrella', 'hourglass', 'clock',
            'gift', 'light_bulb', 'book', 'pencil', 'paperclip', 'scissors', 'lock', 'key',
            'hammer', 'telephone', 'flag', 'train', 'bicycle', 'aeroplane', 'rocket', 'trophy',
            'ball', 'guitar', 'trumpet', 'bell', 'anchor', 'headphones', 'folder', 'pin',
        ]
        self.assertEqual([e.description for e in VERIFICATION_EMOJIS], expected)

    def test_spec_field_aliases(self):
        entry = VERIFICATION_EMOJIS[5]
        self.assertEqual(entry.glyph, entry.emoji)
        self.assertEqual(entry.label, entry.description)
        self.assertEqual(str(entry), '🐷 pig')

    def test_entries_are_immutable(self):
        with self.assertRaises(AttributeError):
            VERIFICATION_EMOJIS[0].emoji = '🐱'
        with self.assertRaises(TypeError):
            VERIFICATION_EMOJIS[0] = VERIFICATION_EMOJIS[1]


class EmojiLookupTests(SimpleTestCase):

    def test_lookup_in_range(self):
        for code in range(64):
            self.assertIs(emoji_for_code(code), VERIFICATION_EMOJIS[code])

    def test_lookup_wraps_large_codes(self):
        self.assertEqual(emoji_for_code(64).description, 'dog')
        self.assertEqual(emoji_for_code(127).description, 'pin')
        self.assertEqual(emoji_for_code(64 * 1000 + 3).description, 'horse')

    def test_lookup_wraps_negative_codes(self):
        for code in (-1, -63, -64, -65, -1000):
            self.assertEqual(emoji_for_code(code), VERIFICATION_EMOJIS[((code % 64) + 64) % 64])
        self.assertEqual(emoji_for_code(-1).description, 'pin')

    def test_lookup_rejects_non_int(self):
        for bad in ('3', 3.0, None, True):
            with self.assertRaises(TypeError):
                emoji_for_code(bad)

    def test_lookup_accepts_integer_like_types(self):
        class SixtyFive:
            def __index__(self):
                return 65

        self.assertEqual(emoji_for_code(SixtyFive()).description, 'cat')

    def test_all_emojis_is_a_copy(self):
        pool = all_verification_emojis()
        self.assertEqual(pool, list(VERIFICATION_EMOJIS))
        pool.clear()
        self.assertEqual(len(all_verification_emojis()), 64)


class StaticEmojiTests(SimpleTestCase):

    def test_returns_seven_distinct_entries(self):
        picked = random_static_emojis()
        self.assertEqual(len(picked), 7)
        self.assertEqual(len(set(picked)), 7)
        for emoji in picked:
            self.assertIn(emoji, VERIFICATION_EMOJIS)

    def test_seeded_rng_is_reproducible(self):
        first = random_static_emojis(rng=random.Random(42))
        second = random_static_emojis(rng=random.Random(42))
        self.assertEqual(first, second)

    def test_custom_count(self):
        self.assertEqual(random_static_emojis(count=0), [])
        self.assertEqual(sorted(random_static_emojis(count=64), key=VERIFICATION_EMOJIS.index),
                         list(VERIFICATION_EMOJIS))

    def test_invalid_count(self):
        with self.assertRaises(ValueError):
            random_static_emojis(count=65)
        with self.assertRaises(ValueError):
            random_static_emojis(count=-1)
