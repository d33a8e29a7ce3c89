"""
Prompt text and deterministic script templates, keyed by tone.
"""

from typing import Dict, List

from ....models.generation import Tone

WORDS_PER_MINUTE = 150
PUNCHY_WORD_FACTOR = 0.85
MAX_WORDS_PER_LINE = 10

TONE_INSTRUCTIONS: Dict[Tone, str] = {
    Tone.MOTIVATIONAL: (
        "Create an inspiring and energizing script that motivates viewers to take action. "
        "Use powerful, action-oriented language. Include calls to action."
    ),
    Tone.EMOTIONAL: (
        "Create a heartfelt and emotionally resonant script that connects with viewers on a deep level. "
        "Use empathetic language and emotional storytelling."
    ),
    Tone.EDUCATIONAL: (
        "Create an informative and clear script that teaches valuable insights. "
        "Use structured, easy-to-understand language. Focus on key takeaways."
    ),
    Tone.AGGRESSIVE: (
        "Create a bold and direct script that challenges viewers. "
        "Use strong, assertive language. Create urgency and demand immediate action."
    ),
    Tone.CALM: (
        "Create a peaceful and soothing script that promotes mindfulness. "
        "Use gentle, reflective language. Encourage inner peace and self-discovery."
    ),
}

STANDARD_SYSTEM_PROMPT = (
    "You are an expert video script writer specializing in engaging, concise scripts "
    "for social media video. Your scripts are written for voice-over narration and "
    "visual storytelling."
)

PUNCHY_SYSTEM_PROMPT = (
    "You write viral short-form video scripts for TikTok, Instagram Reels and YouTube "
    "Shorts. Every line you write becomes one on-screen caption."
)

STANDARD_PROMPT = """Create a {duration}-second {tone} video script for a book promotion.

Book Title: "{title}"
Book Description: "{description}"

Requirements:
- Approximately {target_words} words (for {duration} seconds of narration)
- Tone: {tone_instruction}
- Start with a hook that grabs attention
- Include the book title naturally in the script
- End with a strong call to action
- Conversational, natural speaking style; avoid complex sentences
- Keep paragraphs short (2-3 sentences max)

Return ONLY the script text, no commentary or formatting."""

PUNCHY_PROMPT = """Create a {duration}-second {tone} video script about "{title}".

Book/Topic: "{title}"
Description: "{description}"

CRITICAL REQUIREMENTS:
- Each sentence MUST be 10 words or fewer
- Start with a powerful hook (first 3 seconds)
- Arc: hook, build-up, key message, call to action
- Each line is one caption; write for voice-over with natural pauses
- Mix questions, statements and commands

TONE: {tone_instruction}

TARGET: ~{target_words} words total

FORMAT: Return ONLY the script with each sentence on a new line. No numbering, no extra formatting."""


# Standard fallback: intro + description clause + closing
STANDARD_INTROS: Dict[Tone, str] = {
    Tone.MOTIVATIONAL: 'Ready to transform your life? "{title}" is the key to unlocking your full potential.',
    Tone.EMOTIONAL: 'Have you ever felt stuck, searching for meaning? "{title}" speaks directly to your heart.',
    Tone.EDUCATIONAL: 'Discover the insights that have helped millions. "{title}" offers practical wisdom.',
    Tone.AGGRESSIVE: 'Stop making excuses. "{title}" is your wake-up call to take massive action now.',
    Tone.CALM: 'In the chaos of everyday life, find peace. "{title}" guides you on a journey of self-discovery.',
}

STANDARD_CLOSINGS: Dict[Tone, str] = {
    Tone.MOTIVATIONAL: "Take the first step today. Your transformation begins now.",
    Tone.EMOTIONAL: "Let this book touch your soul. The journey of healing starts here.",
    Tone.EDUCATIONAL: "Apply these lessons and watch your life improve.",
    Tone.AGGRESSIVE: "No more waiting. Get this book and change your life today.",
    Tone.CALM: "Embrace the stillness within. Your path to peace awaits.",
}

DEFAULT_MIDDLE = "This book will change how you see the world."

# Punchy fallback: hook, two build lines, title line, closing
PUNCHY_HOOKS: Dict[Tone, List[str]] = {
    Tone.MOTIVATIONAL: ["Stop scrolling. Your life needs this.", "Ready to level up? Listen close."],
    Tone.EMOTIONAL: ["This hit me hard. Really hard.", "Your heart needs to hear this."],
    Tone.EDUCATIONAL: ["I learned something mind-blowing today.", "Pay attention. This is important."],
    Tone.AGGRESSIVE: ["Wake up. You're wasting your life.", "No more excuses. None."],
    Tone.CALM: ["Breathe. Everything will be okay.", "Find your center. Start here."],
}

PUNCHY_BUILDS: Dict[Tone, List[str]] = {
    Tone.MOTIVATIONAL: ["Millions have read it.", "Lives have been transformed."],
    Tone.EMOTIONAL: ["It speaks to your soul.", "Every page hits different."],
    Tone.EDUCATIONAL: ["The insights are incredible.", "Practical wisdom on every page."],
    Tone.AGGRESSIVE: ["The truth hurts.", "But you need to hear it."],
    Tone.CALM: ["Peace is within reach.", "One page at a time."],
}

PUNCHY_CLOSINGS: Dict[Tone, List[str]] = {
    Tone.MOTIVATIONAL: ["Your transformation starts now.", "Take action today."],
    Tone.EMOTIONAL: ["Let it heal you.", "Your heart deserves this."],
    Tone.EDUCATIONAL: ["Apply these lessons immediately.", "Knowledge is power."],
    Tone.AGGRESSIVE: ["Get it now.", "Stop making excuses."],
    Tone.CALM: ["Find your peace.", "The journey begins now."],
}

PUNCHY_CLIMAX = '"{title}" is the answer.'
