"""
File Patterns Constants
Chua cac constants lien quan den ignore patterns va file extensions.
"""

# Base ignore patterns (gitignore format) - luon active, ke ca khi khong co .gitignore
BASE_IGNORE_PATTERNS = [
    # VCS metadata
    ".git",
    ".hg",
    ".svn",
    # Dependency caches
    "node_modules",
    "bower_components",
    "jspm_packages",
    "vendor",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".gradle",
    # Build outputs
    "dist",
    "build",
    "out",
    "target",
    "coverage",
    ".next",
    ".nuxt",
    ".turbo",
    ".cache",
    ".parcel-cache",
    # Lock files
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "bun.lock",
    "Cargo.lock",
    "poetry.lock",
    "Pipfile.lock",
    "uv.lock",
    "composer.lock",
    "Gemfile.lock",
    "go.sum",
    # OS generated files
    ".DS_Store",
    "Thumbs.db",
    # Minified bundles va source maps
    "*.min.js",
    "*.min.css",
    "*.map",
]

# Cac nhom extension co the tat bang flag (--no-json, --no-markdown, --no-yaml)
EXCLUDABLE_EXTENSIONS = {
    "json": [".json", ".jsonc", ".json5", ".jsonl", ".ndjson", ".geojson"],
    "markdown": [".md", ".markdown", ".mdx", ".mdown", ".mkd"],
    "yaml": [".yaml", ".yml"],
}

# Markers de nhan dien test/spec files trong --exclude tokens
NAME_PATTERN_MARKERS = (".test.", ".spec.")

# Ky tu wildcard danh dau mot --exclude token la name pattern
WILDCARD_CHAR = "*"

# So bytes dau file duoc doc de phat hien binary
BINARY_SNIFF_BYTES = 8000

# Key cho files khong co extension
NO_EXTENSION_KEY = "no-ext"

# So files hien thi trong bang top files
TOP_FILES_LIMIT = 20

# Tokenizer dung de dem token
DEFAULT_ENCODING_NAME = "o200k_base"
