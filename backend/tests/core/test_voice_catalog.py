"""
Tests for bookreel.core.voice_catalog
"""

import pytest

from bookreel.core.voice_catalog import (
    VOICE_PRESETS,
    get_premade_voices,
    get_render_settings_for_tone,
    get_voice_id_for_tone,
)
from bookreel.models import Tone


class TestVoiceCatalog:
    """Test suite for tone to voice mapping"""

    @pytest.mark.parametrize("tone", list(Tone))
    def test_every_tone_has_a_voice(self, tone):
        assert get_voice_id_for_tone(tone) in VOICE_PRESETS.values()

    def test_tone_accepts_plain_string(self):
        assert get_voice_id_for_tone("Calm") == VOICE_PRESETS["calm"]

    def test_unknown_tone_rejected(self):
        with pytest.raises(ValueError):
            get_voice_id_for_tone("Sarcastic")

    def test_render_settings(self):
        """Calm narration is steadier; aggressive narration more expressive"""
        assert get_render_settings_for_tone(Tone.CALM).stability == 0.7
        assert get_render_settings_for_tone(Tone.MOTIVATIONAL).stability == 0.5
        assert get_render_settings_for_tone(Tone.AGGRESSIVE).style == 0.8
        assert get_render_settings_for_tone(Tone.EDUCATIONAL).use_speaker_boost is True

    def test_premade_voices_is_a_copy(self):
        voices = get_premade_voices()
        voices.clear()
        assert len(get_premade_voices()) == 5
