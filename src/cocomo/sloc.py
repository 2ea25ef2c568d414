"""Count physical source lines of code across files and directories.

Lines are classified as code, comment or blank per file, using the comment
syntax of the language detected from the file name. Only code lines feed the
COCOMO estimate.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

from gitignore_parser import parse_gitignore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class Language:
    """Comment and string syntax for a source language.

    ``doc_strings`` are triple-quoted literals: a line that opens one counts as
    comment when nothing precedes it on that line (a docstring), and as code
    when it follows code (``QUERY = \"\"\"``). ``quotes`` delimit single-line
    string literals, whose contents never open a comment.
    """

    name: str
    line_comments: tuple[str, ...] = ()
    block_comments: tuple[tuple[str, str], ...] = ()
    doc_strings: tuple[str, ...] = ()
    quotes: tuple[str, ...] = ('"',)


_C_STYLE = (("/*", "*/"),)

_PYTHON = Language("Python", ("#",), doc_strings=('"""', "'''"), quotes=('"', "'"))
_SHELL = Language("Shell", ("#",))
_C = Language("C", ("//",), _C_STYLE)
_CPP = Language("C++", ("//",), _C_STYLE)
_JS = Language("JavaScript", ("//",), _C_STYLE)
_TS = Language("TypeScript", ("//",), _C_STYLE)
_HTML = Language("HTML", (), (("<!--", "-->"),))

# Extension (lowercase, with dot) -> language
LANGUAGES: dict[str, Language] = {
    ".py": _PYTHON,
    ".pyi": _PYTHON,
    ".rs": Language("Rust", ("//",), _C_STYLE),
    ".c": _C,
    ".h": _C,
    ".cc": _CPP,
    ".cpp": _CPP,
    ".cxx": _CPP,
    ".hpp": _CPP,
    ".hh": _CPP,
    ".cs": Language("C#", ("//",), _C_STYLE),
    ".java": Language("Java", ("//",), _C_STYLE),
    ".kt": Language("Kotlin", ("//",), _C_STYLE),
    ".scala": Language("Scala", ("//",), _C_STYLE),
    ".swift": Language("Swift", ("//",), _C_STYLE),
    ".go": Language("Go", ("//",), _C_STYLE),
    ".js": _JS,
    ".mjs": _JS,
    ".cjs": _JS,
    ".jsx": _JS,
    ".ts": _TS,
    ".tsx": _TS,
    ".php": Language("PHP", ("//", "#"), _C_STYLE),
    ".rb": Language("Ruby", ("#",), (("=begin", "=end"),)),
    ".pl": Language("Perl", ("#",), (("=pod", "=cut"),)),
    ".lua": Language("Lua", ("--",), (("--[[", "]]"),)),
    ".sh": _SHELL,
    ".bash": _SHELL,
    ".zsh": _SHELL,
    ".sql": Language("SQL", ("--",), _C_STYLE),
    ".html": _HTML,
    ".htm": _HTML,
    ".xml": Language("XML", (), (("<!--", "-->"),)),
    ".css": Language("CSS", (), _C_STYLE),
    ".scss": Language("SCSS", ("//",), _C_STYLE),
    ".toml": Language("TOML", ("#",)),
    ".yaml": Language("YAML", ("#",)),
    ".yml": Language("YAML", ("#",)),
    ".hs": Language("Haskell", ("--",), (("{-", "-}"),)),
    ".ex": Language("Elixir", ("#",)),
    ".exs": Language("Elixir", ("#",)),
    ".r": Language("R", ("#",)),
}

# Exact file names without a telling extension
FILENAMES: dict[str, Language] = {
    "Makefile": Language("Makefile", ("#",)),
    "makefile": Language("Makefile", ("#",)),
    "Dockerfile": Language("Dockerfile", ("#",)),
    "CMakeLists.txt": Language("CMake", ("#",)),
}

DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "__pycache__",
        "node_modules",
        ".venv",
        "venv",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        "target",
        "dist",
        "build",
    }
)

# Per-directory ignore files, in gitignore syntax
IGNORE_FILES = (".gitignore", ".ignore")


@dataclass
class FileStats:
    """Line counts for one file."""

    path: Path
    language: str
    code: int = 0
    comments: int = 0
    blanks: int = 0

    @property
    def lines(self) -> int:
        return self.code + self.comments + self.blanks


@dataclass
class LanguageStats:
    """Line counts summed over all files of one language."""

    name: str
    files: int = 0
    code: int = 0
    comments: int = 0
    blanks: int = 0

    def to_dict(self) -> dict:
        return {
            "files": self.files,
            "code": self.code,
            "comments": self.comments,
            "blanks": self.blanks,
        }


@dataclass
class SlocReport:
    """Line counts for every recognized file under a set of paths."""

    files: list[FileStats] = field(default_factory=list)

    @property
    def code(self) -> int:
        return sum(f.code for f in self.files)

    @property
    def languages(self) -> dict[str, LanguageStats]:
        totals: dict[str, LanguageStats] = {}
        for stats in self.files:
            lang = totals.setdefault(stats.language, LanguageStats(stats.language))
            lang.files += 1
            lang.code += stats.code
            lang.comments += stats.comments
            lang.blanks += stats.blanks
        return dict(sorted(totals.items(), key=lambda item: -item[1].code))

    def to_dict(self) -> dict:
        return {
            "files": len(self.files),
            "code": self.code,
            "languages": {name: lang.to_dict() for name, lang in self.languages.items()},
        }


def detect_language(path: PathLike) -> Optional[Language]:
    """Detect a file's language from its name, or None if unrecognized."""
    path = Path(path)
    if path.name in FILENAMES:
        return FILENAMES[path.name]
    return LANGUAGES.get(path.suffix.lower())


@lru_cache(maxsize=None)
def _token_pattern(language: Language) -> "re.Pattern[str]":
    tokens = [start for start, _ in language.block_comments]
    tokens += language.line_comments + language.doc_strings + language.quotes
    # Longest first: Lua's "--[[" also starts with its line comment
    tokens.sort(key=len, reverse=True)
    return re.compile("|".join(re.escape(t) for t in tokens))


def _string_end(line: str, pos: int, quote: str) -> int:
    """Index just past the closing quote, or the line length if unterminated."""
    while pos < len(line):
        char = line[pos]
        if char == "\\":
            pos += 2
            continue
        if char == quote:
            return pos + 1
        pos += 1
    return len(line)


def classify_lines(lines: Iterable[str], language: Language) -> tuple[int, int, int]:
    """Count ``(code, comments, blanks)`` in a sequence of lines.

    A line counts as code when any part of it lies outside a comment, so
    ``int x; /* note */`` and ``/* note */ int x;`` are both code. Lines that
    only open, continue or close a comment are comments.
    """
    code = comments = blanks = 0
    pattern = _token_pattern(language)
    block_end = None
    # True while inside a triple-quoted string that code opened
    in_code_string = False

    for raw in lines:
        line = raw.strip()
        if not line:
            if block_end is None:
                blanks += 1
            elif in_code_string:
                code += 1
            else:
                comments += 1
            continue

        has_code = has_comment = False
        pos = 0
        while pos < len(line):
            if block_end is not None:
                end = line.find(block_end, pos)
                if in_code_string:
                    has_code = True
                else:
                    has_comment = True
                if end < 0:
                    break
                pos = end + len(block_end)
                block_end = None
                in_code_string = False
                continue

            match = pattern.search(line, pos)
            if match is None:
                has_code = has_code or bool(line[pos:].strip())
                break
            if line[pos:match.start()].strip():
                has_code = True

            token = match.group()
            pos = match.end()
            if token in language.line_comments:
                has_comment = True
                break
            if token in language.doc_strings:
                block_end = token
                in_code_string = has_code
                has_comment = has_comment or not has_code
                continue
            if token in language.quotes:
                has_code = True
                pos = _string_end(line, pos, token)
                continue
            for start, close in language.block_comments:
                if token == start:
                    block_end = close
                    has_comment = True
                    break

        if has_code:
            code += 1
        elif has_comment:
            comments += 1
        else:
            blanks += 1

    return code, comments, blanks


def count_file(path: PathLike) -> Optional[FileStats]:
    """Count lines in one file.

    Returns:
        FileStats, or None if the language is unrecognized or the file is
        not readable UTF-8 text
    """
    path = Path(path)
    language = detect_language(path)
    if language is None:
        return None

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("Skipping non UTF-8 file: %s", path)
        return None
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return None

    code, comments, blanks = classify_lines(text.splitlines(), language)
    return FileStats(path, language.name, code, comments, blanks)


def _load_ignore_files(directory: str) -> list[Callable[[str], bool]]:
    """Parse the ignore files in one directory into path matchers."""
    matchers = []
    for name in IGNORE_FILES:
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            continue
        try:
            matchers.append(parse_gitignore(path, base_dir=directory))
        except OSError as e:
            logger.warning("Could not read %s: %s", path, e)
            continue
        logger.debug("Loaded ignore rules from %s", path)
    return matchers


def _parent_ignore_rules(directory: str) -> list[Callable[[str], bool]]:
    """Ignore rules from the directories above ``directory`` up to its git root.

    Outside a git work tree only the scanned directories' own files apply.
    """
    parents = []
    current = directory
    while True:
        if os.path.isdir(os.path.join(current, ".git")):
            break
        parent = os.path.dirname(current)
        if parent == current:
            return []
        parents.append(parent)
        current = parent

    matchers = []
    for parent in reversed(parents):
        matchers.extend(_load_ignore_files(parent))
    return matchers


def iter_source_files(
    paths: Iterable[PathLike],
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    use_ignore_files: bool = True,
) -> Iterator[Path]:
    """Yield files given directly and files found under given directories.

    Inside directories, paths matched by a ``.gitignore`` or ``.ignore`` file
    are skipped. Files named directly are always yielded.
    """
    excluded = set(exclude_dirs)

    for entry in paths:
        entry = Path(entry)
        if not entry.exists():
            logger.warning("Path not found: %s", entry)
            continue
        if entry.is_file():
            yield entry
            continue

        top = os.path.abspath(entry)
        rules = {top: _parent_ignore_rules(top) if use_ignore_files else []}

        for root, dirnames, filenames in os.walk(entry):
            absroot = os.path.abspath(root)
            matchers = rules.pop(absroot, [])
            if use_ignore_files:
                matchers = matchers + _load_ignore_files(absroot)

            def ignored(name: str) -> bool:
                full = os.path.join(absroot, name)
                return any(match(full) for match in matchers)

            dirnames[:] = sorted(d for d in dirnames if d not in excluded and not ignored(d))
            for d in dirnames:
                rules[os.path.join(absroot, d)] = matchers
            for name in sorted(filenames):
                if ignored(name):
                    logger.debug("Ignored: %s", os.path.join(root, name))
                    continue
                yield Path(root) / name


def count_paths(
    paths: Iterable[PathLike],
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    use_ignore_files: bool = True,
) -> SlocReport:
    """Count lines in every recognized file under the given paths."""
    report = SlocReport()
    for path in iter_source_files(paths, exclude_dirs, use_ignore_files):
        stats = count_file(path)
        if stats is not None:
            report.files.append(stats)

    logger.info(
        "Counted %d code lines in %d files (%d languages)",
        report.code,
        len(report.files),
        len(report.languages),
    )
    return report


def total_sloc(paths: Iterable[PathLike]) -> float:
    """Total code lines across all recognized files under the given paths."""
    return float(count_paths(paths).code)
