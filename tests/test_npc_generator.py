from gumshoe.npcs.generator import NPCProfileGenerator, fingerprint_hash


def test_same_seed_and_index_give_identical_profiles():
    first = NPCProfileGenerator(1337).generate(4)
    second = NPCProfileGenerator(1337).generate(4)
    assert first.traits.model_dump() == second.traits.model_dump()
    assert first == second


def test_profile_independent_of_generation_order():
    generator = NPCProfileGenerator(55)
    batch = generator.generate_many(6)
    assert NPCProfileGenerator(55).generate(5) == batch[5]


def test_different_city_seeds_differ():
    profiles_a = NPCProfileGenerator(1).generate_many(5)
    profiles_b = NPCProfileGenerator(2).generate_many(5)
    assert [p.fingerprint_hash for p in profiles_a] != [p.fingerprint_hash for p in profiles_b]


def test_profile_shape():
    profile = NPCProfileGenerator(1337).generate(12, place_ids=["diner", "pier"])
    assert profile.id == "npc_012"
    assert profile.name == f"{profile.first_name} {profile.last_name}"
    assert 150 <= profile.traits.height_cm <= 200
    assert len(profile.traits.scars) <= 2
    assert profile.fingerprint_hash == fingerprint_hash(1337, "npc_012")
    assert len(profile.fingerprint_hash) == 16
    hours = [stop.hour for stop in profile.routine]
    assert 3 <= len(hours) <= 5
    assert hours == sorted(set(hours))
    assert {stop.place for stop in profile.routine} <= {"diner", "pier"}
    assert list(profile.affiliations) == sorted(set(profile.affiliations))
    assert len(profile.affiliations) <= 3


def test_stop_at_wraps_to_last_stop():
    profile = NPCProfileGenerator(8).generate(0)
    first = profile.routine[0]
    assert profile.stop_at(first.hour) == first
    if first.hour > 0:
        assert profile.stop_at(first.hour - 1) == profile.routine[-1]
