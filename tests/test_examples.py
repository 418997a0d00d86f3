import os
import runpy

import pytest

EXAMPLES_MOD = "examples"
BASE_PATH = os.path.dirname(os.path.realpath(__file__))
EXAMPLES_DIR = os.path.join(BASE_PATH, "..", EXAMPLES_MOD)
EXAMPLE_FILES = sorted(f for f in os.listdir(EXAMPLES_DIR) if f.endswith(".py"))


@pytest.mark.parametrize("filename", EXAMPLE_FILES)
def test_examples(filename):
    runpy.run_path(os.path.join(EXAMPLES_DIR, filename), run_name="__main__")
