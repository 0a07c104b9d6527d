import os
from pathlib import Path
import subprocess
import sys

import pytest

from gumshoe.cases.generator import CaseGenerator
from gumshoe.cases.templates import DEFAULT_TEMPLATES
from gumshoe.npcs.generator import NPCProfileGenerator, fingerprint_hash
from gumshoe.util.rng import Rng, derive_seed

SRC = Path(__file__).resolve().parents[1] / "src"

NPCS = ["npc_000", "npc_001", "npc_002", "npc_003"]
LOCATIONS = ["harbor:block_0", "harbor:block_1", "harbor:block_2"]

CHILD_SCRIPT = """
from gumshoe.cases.generator import CaseGenerator
from gumshoe.cases.templates import DEFAULT_TEMPLATES
from gumshoe.npcs.generator import NPCProfileGenerator

npcs = ["npc_000", "npc_001", "npc_002", "npc_003"]
locations = ["harbor:block_0", "harbor:block_1", "harbor:block_2"]
print(CaseGenerator(DEFAULT_TEMPLATES).plan_crime(npcs, locations, 2024).model_dump_json())
print(NPCProfileGenerator(1337).generate(4).model_dump_json())
"""


def _run_child(hash_seed: str) -> list[str]:
    env = dict(os.environ)
    env["PYTHONHASHSEED"] = hash_seed
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", CHILD_SCRIPT],
        capture_output=True,
        text=True,
        env=env,
        check=True,
        timeout=60,
    )
    return result.stdout.splitlines()


def test_rng_golden_sequence():
    rng = Rng(42)
    draws = [rng.range_float(0.0, 1.0) for _ in range(3)]
    assert draws == [0.6394267984578837, 0.025010755222666936, 0.27502931836911926]


def test_fork_seed_golden_value():
    assert derive_seed(99, "npc:1") == 0xA4AE6C3D7B261998
    assert Rng(99).fork("npc:1").current_seed == 0xA4AE6C3D7B261998


def test_fingerprint_hash_golden_value():
    assert fingerprint_hash(1337, "npc_004") == "cc97bb4ad024a5f6"
    assert NPCProfileGenerator(1337).generate(4).fingerprint_hash == "cc97bb4ad024a5f6"


@pytest.mark.parametrize("hash_seed", ["0", "1", "4242"])
def test_generation_identical_across_processes(hash_seed):
    crime_json, profile_json = _run_child(hash_seed)
    crime = CaseGenerator(DEFAULT_TEMPLATES).plan_crime(NPCS, LOCATIONS, 2024)
    profile = NPCProfileGenerator(1337).generate(4)
    assert crime_json == crime.model_dump_json()
    assert profile_json == profile.model_dump_json()
