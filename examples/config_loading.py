"""config_loading.py"""

from pathlib import Path

from argtree import loader

program = loader(Path(__file__).parent / "shop.yaml")

if __name__ == "__main__":
    program.main()
