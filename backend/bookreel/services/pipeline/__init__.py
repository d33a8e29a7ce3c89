"""
Generation pipeline

Stages (leaves first): script, audio, media, subtitles, storyboard,
assembly, export. The orchestrator in ``orchestrator.py`` sequences them.
Import stages from their sub-packages; this package stays import-free so
stage modules can depend on ``results`` and ``fallback`` without cycles.
"""
