# file: run_sampler.py
from __future__ import annotations
import sys
import pathlib

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sampling_engine.cli import main


if __name__ == "__main__":
    sys.exit(main())
