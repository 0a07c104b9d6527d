"""World dump helpers for debugging."""

from __future__ import annotations

from gumshoe.world.registry import CaseRegistry


def dump_world(registry: CaseRegistry) -> str:
    lines: list[str] = []
    lines.append(f"City seed: {registry.city_seed}")
    lines.append("")
    lines.append("NPCs:")
    for profile in registry.npcs.values():
        traits = profile.traits
        trait_text = (
            f"{traits.height_cm}cm {traits.build} {traits.hair_color} {traits.hair_style} hair,"
            f" {traits.eye_color} eyes"
        )
        if traits.glasses:
            trait_text += ", glasses"
        if traits.scars:
            trait_text += f", scars({', '.join(traits.scars)})"
        lines.append(f"- {profile.name} [{profile.id}] {trait_text} print={profile.fingerprint_hash}")
        for stop in profile.routine:
            lines.append(f"    {stop.hour:02d}:00 {stop.activity} @ {stop.place}")
        if profile.affiliations:
            lines.append(f"    affiliations: {', '.join(profile.affiliations)}")
    lines.append("")
    lines.append("Crimes:")
    for crime in sorted(registry.crimes.values(), key=lambda c: (c.window.start, c.id)):
        end = "open-ended" if crime.window.unbounded else f"t{crime.window.end}"
        lines.append(
            f"- {crime.id} {crime.type} sev={crime.severity} status={crime.status} "
            f"loc={crime.location} t{crime.window.start}..{end} "
            f"culprit={crime.culprit_id or '-'} victim={crime.victim_id or '-'}"
        )
        for evidence in registry.evidence_for(crime.id):
            lines.append(f"    {evidence.id} {evidence.type} {evidence.metadata.model_dump(exclude={'kind'})}")
            for entry in evidence.custody_chain:
                lines.append(f"      t{entry.timestamp} {entry.actor}: {entry.action}")
    return "\n".join(lines)
