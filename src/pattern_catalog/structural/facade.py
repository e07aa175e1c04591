"""
Facade: one call to drive a home theater.

HomeTheaterFacade hides the projector, sound system and DVD player behind
watch_movie() and end_movie(), which always operate the devices in the
same order.
"""

from pattern_catalog.narrator import Narrator


class _Device:
    label = "Device"

    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        self.narrator.say(f"{self.label} is ON")

    def off(self) -> None:
        self.is_on = False
        self.narrator.say(f"{self.label} is OFF")


class DVDPlayer(_Device):
    label = "DVD Player"

    def play(self, movie: str) -> None:
        self.narrator.say(f"Playing movie: {movie}")


class Projector(_Device):
    label = "Projector"

    def set_input(self, source: str) -> None:
        self.narrator.say(f"Projector input set to: {source}")


class SoundSystem(_Device):
    label = "Sound System"

    def set_volume(self, level: int) -> None:
        self.narrator.say(f"Sound System volume set to {level}")


class HomeTheaterFacade:
    def __init__(
        self,
        dvd_player: DVDPlayer,
        projector: Projector,
        sound_system: SoundSystem,
        narrator: Narrator | None = None,
    ) -> None:
        self.dvd_player = dvd_player
        self.projector = projector
        self.sound_system = sound_system
        self.narrator = narrator if narrator is not None else Narrator()

    def watch_movie(self, movie: str) -> None:
        self.narrator.say("Setting up the home theater to watch a movie...")
        self.projector.on()
        self.projector.set_input("DVD")
        self.sound_system.on()
        self.sound_system.set_volume(50)
        self.dvd_player.on()
        self.dvd_player.play(movie)

    def end_movie(self) -> None:
        self.narrator.say("Shutting down the home theater...")
        self.dvd_player.off()
        self.projector.off()
        self.sound_system.off()


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    home_theater = HomeTheaterFacade(
        DVDPlayer(narrator),
        Projector(narrator),
        SoundSystem(narrator),
        narrator,
    )

    home_theater.watch_movie("Inception")
    home_theater.end_movie()


if __name__ == "__main__":
    main()
