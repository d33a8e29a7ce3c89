"""
Curated stock footage library

Generic, brand-free shot descriptions with search terms that return usable
results on Pexels and Unsplash, keyed by tone.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class FootageEntry:
    description: str
    search_terms: Tuple[str, ...]


STOCK_FOOTAGE_LIBRARY: Dict[str, Tuple[FootageEntry, ...]] = {
    "motivational": (
        FootageEntry(
            "Person climbing rocky mountain at sunrise, reaching summit",
            ("mountain climbing", "sunrise peak", "achievement", "success"),
        ),
        FootageEntry(
            "Runner sprinting on track in slow motion, determination visible",
            ("running motivation", "athlete training", "determination", "sprint"),
        ),
        FootageEntry(
            "Hands planting small tree seedling in soil, growth concept",
            ("planting tree", "growth", "new beginning", "nature"),
        ),
        FootageEntry(
            "Person standing on cliff edge facing ocean at golden hour",
            ("cliff ocean", "contemplation", "freedom", "adventure"),
        ),
        FootageEntry(
            "Close-up of person writing goals in journal, morning light",
            ("writing journal", "planning", "goals", "productivity"),
        ),
        FootageEntry(
            "Aerial view of winding road through mountains, journey concept",
            ("mountain road", "journey", "path", "adventure aerial"),
        ),
        FootageEntry(
            "Person doing push-ups outdoors, fitness and discipline",
            ("fitness training", "push ups", "workout motivation", "discipline"),
        ),
        FootageEntry(
            "Time-lapse of sunrise over city skyline, new day beginning",
            ("city sunrise", "new day", "urban dawn", "fresh start"),
        ),
        FootageEntry(
            "Hands holding open book with highlights, learning and growth",
            ("reading book", "learning", "education", "knowledge"),
        ),
        FootageEntry(
            "Person meditating on mountain top, peace and clarity",
            ("mountain meditation", "mindfulness", "zen", "peace"),
        ),
    ),
    "calm": (
        FootageEntry(
            "Gentle ocean waves lapping on sandy beach, peaceful rhythm",
            ("ocean waves", "beach calm", "peaceful water", "serene"),
        ),
        FootageEntry(
            "Rain droplets on window glass with blurred background",
            ("rain window", "peaceful rain", "water drops", "calm"),
        ),
        FootageEntry(
            "Zen garden with raked sand patterns, minimalist peace",
            ("zen garden", "sand pattern", "meditation", "minimalist"),
        ),
        FootageEntry(
            "Floating lotus flower on still water surface",
            ("lotus flower", "calm water", "peaceful", "zen"),
        ),
    ),
    "emotional": (
        FootageEntry(
            "Parent and child holding hands walking at sunset",
            ("family sunset", "holding hands", "connection", "love"),
        ),
        FootageEntry(
            "Person hugging loved one, emotional embrace",
            ("hugging", "embrace", "emotional", "connection"),
        ),
    ),
    "educational": (
        FootageEntry(
            "Stack of books on wooden desk with reading glasses",
            ("books desk", "study", "learning", "education"),
        ),
        FootageEntry(
            "Person taking notes while reading, focused learning",
            ("taking notes", "studying", "learning", "focus"),
        ),
    ),
    "aggressive": (
        FootageEntry(
            "Athlete lifting heavy weights, maximum effort",
            ("weightlifting", "strength training", "power", "gym"),
        ),
        FootageEntry(
            "Boxing gloves hitting punching bag with force",
            ("boxing training", "punching bag", "power", "combat"),
        ),
    ),
}

DEFAULT_LIBRARY = "motivational"

OPENING_NOTE = "Hook shot - grab attention immediately. Use bold text, quick zoom. Keep text readable for 2-3 seconds."
CLOSING_NOTE = "CTA shot - end with strong message. Add follow button prompt, website link, or next action."
MIDDLE_NOTES = (
    "Smooth transition from previous scene. Text overlay with key message.",
    "Medium shot with dynamic text animation. Keep visuals engaging.",
    "Close-up with emphasis on emotional beat. Sync text with voiceover.",
    "Wide shot establishing context. Use split-screen if needed for multiple points.",
    "B-roll footage supporting the narrative. Overlay statistics or quotes.",
)


def library_for(tone: str) -> Tuple[FootageEntry, ...]:
    return STOCK_FOOTAGE_LIBRARY.get(str(tone).lower(), STOCK_FOOTAGE_LIBRARY[DEFAULT_LIBRARY])


def visual_notes(index: int, total: int) -> str:
    if index == 0:
        return OPENING_NOTE
    if index == total - 1:
        return CLOSING_NOTE
    return MIDDLE_NOTES[index % len(MIDDLE_NOTES)]
