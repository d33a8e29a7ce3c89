"""
Render host checks.

ffmpeg and ffprobe must be on PATH and the output, video and temp
directories must accept writes before a job can finish. Startup collects
both into a RuntimeReport; /health reuses the tool lookup per request.
"""

import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional


REQUIRED_RENDER_TOOLS = ("ffmpeg", "ffprobe")

TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_bool_env(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def locate_render_tools(tools: Iterable[str] = REQUIRED_RENDER_TOOLS) -> Dict[str, Optional[str]]:
    """Resolved path per tool, None where it is not on PATH"""
    return {tool: shutil.which(tool) for tool in tools}


def missing_runtime_tools(tools: Iterable[str] = REQUIRED_RENDER_TOOLS) -> List[str]:
    return [tool for tool, path in locate_render_tools(tools).items() if path is None]


def ensure_writable_directory(path: Path, *, create: bool = True) -> None:
    """Raise RuntimeError unless ``path`` is a directory this process can write to"""
    if create:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RuntimeError(f"Cannot create directory: {path}") from exc
    if not path.is_dir():
        raise RuntimeError(f"Required directory is missing: {path}")
    try:
        # Deleted on close, so nothing is left behind
        with tempfile.TemporaryFile(dir=path) as scratch:
            scratch.write(b"ok")
    except OSError as exc:
        raise RuntimeError(f"Directory is not writable: {path}") from exc


@dataclass
class DirectoryStatus:
    path: Path
    error: Optional[str] = None

    @property
    def writable(self) -> bool:
        return self.error is None


@dataclass
class RuntimeReport:
    directories: Dict[str, DirectoryStatus] = field(default_factory=dict)
    tools: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def missing_tools(self) -> List[str]:
        return [tool for tool, path in self.tools.items() if path is None]

    @property
    def ok(self) -> bool:
        return not self.missing_tools and all(d.writable for d in self.directories.values())

    def as_dict(self) -> Dict[str, object]:
        """Log-friendly view"""
        return {
            "ok": self.ok,
            "directories": {
                name: {"path": str(status.path), "writable": status.writable, "error": status.error}
                for name, status in self.directories.items()
            },
            "tools": {"required": list(self.tools), "missing": self.missing_tools},
        }


def run_startup_runtime_checks(
    *,
    directories: Mapping[str, Path],
    strict_tools: bool,
    strict_dirs: bool = True,
) -> RuntimeReport:
    """Check directories then tools; only the strict groups raise"""
    report = RuntimeReport()

    for name, path in directories.items():
        try:
            ensure_writable_directory(path)
        except RuntimeError as exc:
            if strict_dirs:
                raise
            report.directories[name] = DirectoryStatus(path, error=str(exc))
        else:
            report.directories[name] = DirectoryStatus(path)

    report.tools = locate_render_tools()
    if strict_tools and report.missing_tools:
        raise RuntimeError("Missing required runtime tools: " + ", ".join(report.missing_tools))

    return report
