"""
Storyboard report template

Wraps scene content, whichever path produced it, in the same guide for
sourcing footage and producing the edit.
"""

from datetime import datetime
from typing import Optional

RULE = "━" * 65

HEADER = """╔═══════════════════════════════════════════════════════════════════╗
║                      VIDEO STORYBOARD                             ║
║                 Stock Footage Optimized                           ║
╚═══════════════════════════════════════════════════════════════════╝"""

SOURCING_GUIDE = """STOCK FOOTAGE SOURCING GUIDE:

🎬 WHERE TO FIND FOOTAGE:
• Pexels Videos (https://www.pexels.com/videos/) - FREE
• Pixabay Videos (https://pixabay.com/videos/) - FREE
• Unsplash (https://unsplash.com/) - FREE photos
• Coverr (https://coverr.co/) - FREE video loops

🔍 SEARCH TIPS:
• Use the "STOCK SEARCH" keywords provided for each scene
• Filter by: Vertical/Portrait orientation (9:16)
• Look for: High resolution (1080p minimum)
• Avoid: Logos, brands, copyrighted content
• Prefer: Generic, relatable visuals

✅ COPYRIGHT-FREE GUIDELINES:
• All scenes use generic descriptions
• No specific brands, characters, or logos
• Check each clip's license before commercial use"""

PRODUCTION_NOTES = """PRODUCTION NOTES:

📱 MOBILE OPTIMIZATION:
• Keep text large and readable (minimum 60pt font)
• Use high contrast for captions (white text on dark bg)
• Position text in the center "safe zone"
• Test on an actual phone screen

🎨 VISUAL STYLE:
• Keep color grading consistent across clips
• Use smooth transitions (0.5-1 second)
• Add a subtle zoom or pan to static footage
• Match clip energy to the voiceover tone

⏱️ TIMING:
• Sync scene changes with script sentences
• Keep each scene 3-4 seconds minimum
• Match visual intensity to audio peaks

📝 CAPTIONS:
• Add from the included SRT subtitle file
• Position: lower third or center
• Style: bold, sans-serif font"""

EDITING_SOFTWARE = """RECOMMENDED EDITING SOFTWARE:

🥇 CapCut (best for beginners)
   • Mobile and desktop versions
   • Auto-captions and vertical templates

💎 Adobe Premiere Rush
   • Cloud sync across devices
   • Motion graphics templates

🎬 DaVinci Resolve (advanced)
   • Free full-featured version
   • Professional color grading

📱 InShot (mobile only)
   • Quick edits and text overlays"""

EXPORT_SETTINGS = """EXPORT SETTINGS:

Resolution: 1080x1920 (9:16 vertical)
Frame Rate: 30fps or 60fps
Bitrate: 10-15 Mbps
Format: MP4 (H.264)
Audio: AAC 128-192 kbps"""

FOOTER = """✨ READY TO CREATE YOUR VIDEO!

Use the provided search terms to find clips for each scene.
Happy editing! 🎥"""


def format_timestamp(start_seconds: float, end_seconds: float) -> str:
    """MM:SS-MM:SS, seconds truncated"""
    def _clock(seconds: float) -> str:
        minutes, secs = divmod(int(seconds), 60)
        return f"{minutes:02d}:{secs:02d}"

    return f"{_clock(start_seconds)}-{_clock(end_seconds)}"


def format_storyboard(
    title: str,
    description: str,
    tone: str,
    duration: int,
    content: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """Full storyboard document around ``content``.

    The timestamp line is rendered only when ``generated_at`` is given, so
    identical inputs give identical documents.
    """
    details = [
        f"PROJECT: {title}",
        f"DESCRIPTION: {description}",
        f"TONE: {tone}",
        f"DURATION: {duration} seconds",
        "FORMAT: Vertical (9:16) for TikTok/Reels/Shorts",
    ]
    if generated_at is not None:
        details.append("")
        details.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")

    sections = [
        HEADER + "\n\n" + "\n".join(details),
        "SCENES:\n\n" + content.strip(),
        SOURCING_GUIDE,
        PRODUCTION_NOTES,
        EDITING_SOFTWARE,
        EXPORT_SETTINGS,
        FOOTER,
    ]
    return f"\n\n{RULE}\n\n".join(sections) + f"\n\n{RULE}\n"
