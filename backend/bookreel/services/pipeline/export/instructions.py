"""
instructions.md for the editor package
"""


def create_instructions(title: str, description: str, tone: str, duration: int, script: str) -> str:
    word_count = len(script.split())
    return f"""# CapCut Video Package
## {title}

---

## 📦 Package Contents

✅ **narration.mp3** - AI voice-over audio
✅ **captions.srt** - Timed subtitles (SRT format)
✅ **storyboard.txt** - Scene descriptions with stock search terms
✅ **instructions.md** - This file

---

## 📋 Project Details

- **Title:** {title}
- **Description:** {description}
- **Tone:** {tone}
- **Duration:** {duration} seconds
- **Format:** Vertical (9:16)
- **Script Length:** {word_count} words

---

## 🎬 Quick Start Guide

### Step 1: Open CapCut
- Download CapCut from [capcut.com](https://www.capcut.com) or use the mobile app
- Create a new project

### Step 2: Set Up Project
- Choose the **9:16 aspect ratio** (portrait)
- Set duration to **{duration} seconds**
- Import **narration.mp3** to your timeline

### Step 3: Add Visuals
- Follow **storyboard.txt** for scene ideas and stock search terms
- Add stock footage from Pexels, Pixabay, or your own clips
- Match visuals to the narration timing

### Step 4: Add Subtitles
- Import **captions.srt**, or use CapCut's auto-caption feature
- Choose bold, readable fonts (60pt+)
- Keep text in the safe zone (center or lower third)

### Step 5: Enhance
- Add background music at 20-30% volume
- Apply consistent color grading
- Add text overlays for key points

### Step 6: Export
- **Resolution:** 1080x1920
- **Frame Rate:** 30fps
- **Format:** MP4

---

## 💡 Pro Tips

### Engagement
- Hook viewers in the first 3 seconds
- Change scenes every 3-5 seconds
- Most viewers watch without sound, so keep captions on
- End with a call to action

### Visuals
- Use footage of at least 1080p
- Match the color scheme to the {tone.lower()} tone
- Keep text large and high-contrast

### Audio
- Keep the narration as the primary audio
- Use sound effects sparingly

---

## 📱 Platform Notes

### TikTok
- {duration}s fits comfortably
- Use trending sounds and hashtags

### Instagram Reels
- Max 90s ({duration}s is ideal)
- Share to Stories too

### YouTube Shorts
- Max 60s (trim if needed)
- Add #Shorts to the title

---

## 🆘 Troubleshooting

### Audio not syncing?
- Check the timeline is set to **{duration}s**
- Make sure the narration starts at **00:00**

### Subtitles not showing?
- Re-import **captions.srt**
- Use auto-captions as a backup

### Video too long or short?
- Speed clips up or down slightly (1.1x or 0.9x)
- Adjust scene durations proportionally

---

## 📚 Resources

- **Stock Footage:** [pexels.com/videos](https://pexels.com/videos), [pixabay.com/videos](https://pixabay.com/videos)
- **Free Music:** [uppbeat.io](https://uppbeat.io)
- **Fonts:** [fonts.google.com](https://fonts.google.com)
"""
