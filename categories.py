"""Extension table for the folder organizer.

Each category name doubles as the subfolder a matching file is moved into.
"""

OTHERS = "Others"

FOLDER_MAP = {
    "Programs": frozenset({
        ".exe", ".msi", ".bat", ".sh", ".apk", ".app", ".jar", ".cmd", ".gadget",
        ".wsf", ".deb", ".rpm", ".bin", ".com", ".vbs", ".ps1",
    }),
    "Documents": frozenset({
        ".pdf", ".doc", ".docx", ".txt", ".ppt", ".pptx", ".xls", ".xlsx", ".odt",
        ".csv", ".rtf", ".tex", ".epub", ".md", ".log", ".json", ".xml", ".yaml",
        ".yml", ".ini",
    }),
    "Compressed": frozenset({
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso", ".cab", ".arj",
        ".lzh", ".ace", ".uue", ".tar.gz", ".tar.bz2", ".tar.xz",
    }),
    "Music": frozenset({
        ".mp3", ".wav", ".aac", ".flac", ".ogg", ".m4a", ".wma", ".alac", ".amr",
        ".aiff", ".opus", ".mid", ".midi",
    }),
    "Video": frozenset({
        ".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm", ".mpeg", ".mpg",
        ".m4v", ".3gp", ".3g2", ".vob", ".ogv", ".rm", ".rmvb", ".ts", ".m2ts",
    }),
    "Images": frozenset({
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".webp", ".svg",
        ".ico", ".heic", ".raw", ".psd", ".ai", ".indd", ".eps", ".jfif", ".apng",
        ".avif", ".cr2", ".nef", ".orf", ".sr2",
    }),
    OTHERS: frozenset(),  # anything not listed above
}


def build_extension_map(folder_map=FOLDER_MAP) -> dict:
    """Invert ``folder_map`` into ``{extension: category}``; later categories win."""
    lookup = {}
    for folder, extensions in folder_map.items():
        for ext in extensions:
            lookup[ext.lower()] = folder
    return lookup


EXTENSION_MAP = build_extension_map()


def classify(ext: str) -> str:
    return EXTENSION_MAP.get(ext.lower(), OTHERS)


def category_names():
    return list(FOLDER_MAP)
