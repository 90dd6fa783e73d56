"""
Named style presets used when generating multiple variants of one site.

Each preset pins the five mood axes to a characteristic point so the
variants of one business look deliberately different from each other.
"""

from dataclasses import dataclass

from blink.core.ir import MoodSliders


@dataclass(frozen=True)
class VariantPreset:
    """A named point in mood-slider space."""

    id: str
    name: str
    vibe: int
    energy: int
    era: int
    density: int
    price: int

    @property
    def mood_sliders(self) -> MoodSliders:
        return MoodSliders(
            vibe=self.vibe,
            energy=self.energy,
            era=self.era,
            density=self.density,
            price=self.price,
        )


LUXURY = VariantPreset("luxury", "Luxury", vibe=30, energy=35, era=40, density=30, price=90)
FRIENDLY = VariantPreset(
    "friendly", "Friendly Local", vibe=80, energy=60, era=50, density=60, price=40
)
MODERN_MINIMAL = VariantPreset(
    "modern-minimal", "Modern Minimal", vibe=50, energy=40, era=85, density=20, price=70
)
SHARP_CORPORATE = VariantPreset(
    "sharp-corporate", "Sharp & Clean", vibe=35, energy=45, era=95, density=40, price=65
)
BOLD_ENERGETIC = VariantPreset(
    "bold-energetic", "Bold & Fun", vibe=75, energy=90, era=70, density=70, price=50
)
CLASSIC_ELEGANT = VariantPreset(
    "classic-elegant", "Classic Elegant", vibe=25, energy=30, era=20, density=45, price=80
)

VARIANT_PRESETS: dict[str, VariantPreset] = {
    preset.id: preset
    for preset in (
        LUXURY,
        FRIENDLY,
        MODERN_MINIMAL,
        SHARP_CORPORATE,
        BOLD_ENERGETIC,
        CLASSIC_ELEGANT,
    )
}


def get_variant_preset(preset_id: str) -> VariantPreset | None:
    return VARIANT_PRESETS.get(preset_id)


__all__ = [
    "VARIANT_PRESETS",
    "VariantPreset",
    "get_variant_preset",
]
