import pathlib

# Absolute path to the top level directory
ROOT_PATH = pathlib.Path(__file__).parent.parent

# Copy of the architecture table shipped inside the package
EMBEDDED_TABLE_PATH = ROOT_PATH / "gccarch" / "data" / "backends.txt"
