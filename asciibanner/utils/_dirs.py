import os
import sys
import importlib.resources


FONT_EXT = ".txt"


def get_resources_dir():
    """Get the path to the directory of builtin resources (the bundled fonts)."""
    if sys.version_info < (3, 9):
        context = importlib.resources.path("asciibanner.data_files", "__init__.py")
    else:
        ref = importlib.resources.files("asciibanner.data_files") / "__init__.py"
        context = importlib.resources.as_file(ref)
    with context as path:
        pass
    # Return the dir. We assume that the data files are on a normal dir on the fs.
    return str(path.parent)


def _get_font_dirs():
    # User dir first, so a user can shadow a builtin font
    dirs = []
    user_dir = os.getenv("ASCIIBANNER_FONT_DIR")
    if user_dir:
        dirs.append(os.path.abspath(os.path.expanduser(user_dir)))
    dirs.append(get_resources_dir())
    return dirs


def get_font_names():
    """Get a sorted list of the names of the available font sheets,
    e.g. ``["standard"]``. Names are the filenames without extension.
    """
    names = set()
    for dir in _get_font_dirs():
        if not os.path.isdir(dir):
            continue
        for fname in os.listdir(dir):
            if fname.endswith(FONT_EXT):
                names.add(fname[: -len(FONT_EXT)])
    return sorted(names)


def find_font_file(name):
    """Get the filename for the given font name or path.

    An existing file is returned as-is. Otherwise the name is looked up
    (with ".txt" appended if needed) in the ``ASCIIBANNER_FONT_DIR`` directory
    and then among the builtin fonts. Raises FileNotFoundError if no font
    matches.
    """
    if not isinstance(name, str):
        cls = type(name).__name__
        raise TypeError(f"Font name must be str, not '{cls}'")
    if not name:
        raise ValueError("Font name must not be empty.")

    if os.path.isfile(name):
        return name

    fname = name if name.endswith(FONT_EXT) else name + FONT_EXT
    for dir in _get_font_dirs():
        filename = os.path.join(dir, fname)
        if os.path.isfile(filename):
            return filename

    raise FileNotFoundError(f"No banner font named '{name}'")
