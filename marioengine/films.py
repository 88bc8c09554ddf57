"""Animation films: a bitmap with frame boxes, and the holder that loads them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .geometry import Rect

__all__ = ["FilmData", "AnimationFilm", "BitmapLoader", "AnimationFilmHolder"]

Parser = Callable[[str], Iterable["FilmData"]]
EntryParser = Callable[[int, str], "tuple[int, FilmData | None]"]


@dataclass
class FilmData:
    """Description of one film as read from a film list."""

    id: str
    path: str
    rects: list[Rect] = field(default_factory=list)


class AnimationFilm:
    """A bitmap together with the boxes of its frames."""

    def __init__(self, film_id: str, boxes: Iterable[Rect] = (), bitmap: Any = None) -> None:
        self.id = film_id
        self.boxes = list(boxes)
        self.bitmap = bitmap

    @property
    def total_frames(self) -> int:
        return len(self.boxes)

    def frame_box(self, frame_no: int) -> Rect:
        if not 0 <= frame_no < len(self.boxes):
            raise IndexError(f"film {self.id!r} has no frame {frame_no}")
        return self.boxes[frame_no]

    def append(self, rect: Rect) -> None:
        self.boxes.append(rect)

    def set_bitmap(self, bitmap: Any) -> None:
        if self.bitmap is not None:
            raise ValueError(f"film {self.id!r} already has a bitmap")
        self.bitmap = bitmap

    def __str__(self) -> str:
        boxes = "".join(f"{box} " for box in self.boxes)
        return f"[ {self.id},{boxes},{self.bitmap}]"


def _read_bitmap(path: str) -> bytes:
    return Path(path).read_bytes()


class BitmapLoader:
    """Loads bitmaps by path, once each, and releases them all together."""

    def __init__(
        self,
        load_bitmap: Callable[[str], Any] | None = None,
        destroy_bitmap: Callable[[Any], None] | None = None,
    ) -> None:
        self._load_bitmap = load_bitmap or _read_bitmap
        self._destroy_bitmap = destroy_bitmap
        self._bitmaps: dict[str, Any] = {}

    def load(self, path: str) -> Any:
        bitmap = self._bitmaps.get(path)
        if bitmap is None:
            bitmap = self._load_bitmap(path)
            if bitmap is None:
                raise OSError(f"could not load bitmap {path!r}")
            self._bitmaps[path] = bitmap
        return bitmap

    def clean_up(self) -> None:
        if self._destroy_bitmap is not None:
            for bitmap in self._bitmaps.values():
                self._destroy_bitmap(bitmap)
        self._bitmaps.clear()

    def __len__(self) -> int:
        return len(self._bitmaps)


class AnimationFilmHolder:
    """All loaded films, by id."""

    def __init__(self, bitmaps: BitmapLoader | None = None) -> None:
        self.bitmaps = bitmaps if bitmaps is not None else BitmapLoader()
        self._films: dict[str, AnimationFilm] = {}

    def _add(self, data: FilmData) -> None:
        if data.id in self._films:
            raise ValueError(f"film {data.id!r} loaded twice")
        self._films[data.id] = AnimationFilm(data.id, data.rects, self.bitmaps.load(data.path))

    def load(self, text: str, parser: Parser) -> None:
        """Load every film that parser finds in text."""
        for data in parser(text):
            self._add(data)

    def load_entries(self, text: str, entry_parser: EntryParser) -> None:
        """Load films one entry at a time.

        entry_parser(pos, text) returns (chars_read, data); 0 chars read ends the
        list and a negative count reports an error.
        """
        pos = 0
        while True:
            count, data = entry_parser(pos, text)
            if count < 0:
                raise ValueError(f"malformed film entry at position {pos}")
            if count == 0:
                return
            if data is None:
                raise ValueError(f"film entry at position {pos} holds no film")
            pos += count
            self._add(data)

    def get_film(self, film_id: str) -> AnimationFilm | None:
        return self._films.get(film_id)

    def clean_up(self) -> None:
        self._films.clear()

    def __len__(self) -> int:
        return len(self._films)

    def __str__(self) -> str:
        return "".join(
            f"{{ {film_id}->{self._films[film_id]}}}\n" for film_id in sorted(self._films)
        )