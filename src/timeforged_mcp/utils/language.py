"""
Language detection from file extensions.

Used by the send tool when the caller does not name a language.
"""

from typing import Optional


EXTENSION_LANGUAGES = {
    "py": "Python",
    "pyi": "Python",
    "rs": "Rust",
    "go": "Go",
    "ts": "TypeScript",
    "tsx": "TypeScript",
    "js": "JavaScript",
    "jsx": "JavaScript",
    "mjs": "JavaScript",
    "cjs": "JavaScript",
    "java": "Java",
    "kt": "Kotlin",
    "kts": "Kotlin",
    "scala": "Scala",
    "c": "C",
    "h": "C",
    "cpp": "C++",
    "cc": "C++",
    "cxx": "C++",
    "hpp": "C++",
    "cs": "C#",
    "rb": "Ruby",
    "php": "PHP",
    "swift": "Swift",
    "dart": "Dart",
    "lua": "Lua",
    "zig": "Zig",
    "ex": "Elixir",
    "exs": "Elixir",
    "erl": "Erlang",
    "hs": "Haskell",
    "ml": "OCaml",
    "clj": "Clojure",
    "r": "R",
    "jl": "Julia",
    "sh": "Shell",
    "bash": "Shell",
    "zsh": "Shell",
    "ps1": "PowerShell",
    "sql": "SQL",
    "html": "HTML",
    "htm": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "sass": "Sass",
    "vue": "Vue",
    "svelte": "Svelte",
    "json": "JSON",
    "yaml": "YAML",
    "yml": "YAML",
    "toml": "TOML",
    "xml": "XML",
    "md": "Markdown",
    "tf": "Terraform",
    "proto": "Protobuf",
}


def infer_language(entity: str) -> Optional[str]:
    """
    Guess the language of an entity from its last extension.

    'main.py' -> 'Python', 'a.b.rs' -> 'Rust', 'README' -> None.
    Unknown extensions return None.
    """
    if "." not in entity:
        return None
    extension = entity.rsplit(".", 1)[1].lower()
    return EXTENSION_LANGUAGES.get(extension)
