"""A game weapon whose stats change with its attached modification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GunType(Enum):
    """The kind of gun."""

    PISTOL = "Pistol"
    RIFLE = "Rifle"
    SHOTGUN = "Shotgun"
    SNIPER = "Sniper"


class Extra(Enum):
    """A modification fitted to a gun."""

    SILENCER = "Silencer"
    SCOPE = "Scope"
    EXTENDED_MAGS = "ExtendedMags"
    NONE = "None"


@dataclass
class Gun:
    """A gun with its recoil time in seconds and magazine size."""

    gun_type: GunType
    recoil_time: float
    magazine_size: int
    extra: Extra = Extra.NONE

    def update_extra(self, new_extra: Extra) -> None:
        """Fit ``new_extra`` and adjust recoil and magazine size for it."""
        if new_extra is Extra.SILENCER and self.magazine_size < 1:
            raise ValueError("magazine size cannot drop below zero")
        self.extra = new_extra
        if new_extra is Extra.SILENCER:
            self.recoil_time *= 0.9
            self.magazine_size -= 1
        elif new_extra is Extra.SCOPE:
            self.recoil_time *= 1.1
        elif new_extra is Extra.EXTENDED_MAGS:
            self.magazine_size += 5

    def display_info(self) -> str:
        """Print the gun's stats and return the printed text."""
        text = "\n".join(
            (
                f"Gun Type: {self.gun_type.value}",
                f"Recoil Time: {self.recoil_time:.2f} seconds",
                f"Magazine Size: {self.magazine_size}",
                f"Extra: {self.extra.value}",
            )
        )
        print(text)
        return text