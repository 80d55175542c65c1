"""
XMLTV node models

One dataclass per element of the XMLTV DTD. Field order is the order in
which attributes and child elements are written.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar

from xmltv.scalars import XMLTVTime
from xmltv.schema import Codec, attribute, chardata, child, children, element


class LengthUnits(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"


class SubtitlesType(str, Enum):
    TELETEXT = "teletext"
    ONSCREEN = "onscreen"
    DEAF_SIGNED = "deaf-signed"


class ReviewType(str, Enum):
    TEXT = "text"
    URL = "url"


class ImageType(str, Enum):
    POSTER = "poster"
    BACKDROP = "backdrop"
    STILL = "still"
    PERSON = "person"
    CHARACTER = "character"


class ImageSize(IntEnum):
    SMALL = 1
    MEDIUM = 2
    LARGE = 3


class ImageOrientation(str, Enum):
    PORTRAIT = "P"
    LANDSCAPE = "L"


@dataclass(slots=True)
class LocalizedText:
    """Character data with an optional language code"""
    TAG: ClassVar[str] = ""

    lang: str | None = attribute("lang")
    text: str = chardata()


@dataclass(slots=True)
class DisplayName(LocalizedText):
    TAG: ClassVar[str] = "display-name"


@dataclass(slots=True)
class Icon:
    TAG: ClassVar[str] = "icon"

    source: str = attribute("src", default="")
    width: int | None = attribute("width", int)
    height: int | None = attribute("height", int)


@dataclass(slots=True)
class URL:
    TAG: ClassVar[str] = "url"

    system: str | None = attribute("system")
    text: str = chardata()


@dataclass(slots=True)
class Image:
    TAG: ClassVar[str] = "image"

    type: ImageType | None = attribute("type", ImageType)
    size: ImageSize | None = attribute("size", ImageSize)
    orientation: ImageOrientation | None = attribute("orient", ImageOrientation)
    system: str | None = attribute("system")
    text: str = chardata()


@dataclass(slots=True)
class Channel:
    TAG: ClassVar[str] = "channel"

    id: str = attribute("id", default="")
    display_names: list[DisplayName] = children("display-name", DisplayName)
    icons: list[Icon] = children("icon", Icon)
    urls: list[URL] = children("url", URL)


@dataclass(slots=True)
class Title(LocalizedText):
    TAG: ClassVar[str] = "title"


@dataclass(slots=True)
class SubTitle(LocalizedText):
    TAG: ClassVar[str] = "sub-title"


@dataclass(slots=True)
class Description(LocalizedText):
    TAG: ClassVar[str] = "desc"


@dataclass(slots=True)
class Person:
    """A credited person: images and URLs followed by the name"""
    TAG: ClassVar[str] = ""

    images: list[Image] = children("image", Image)
    urls: list[URL] = children("url", URL)
    text: str = chardata()


@dataclass(slots=True)
class Director(Person):
    TAG: ClassVar[str] = "director"


@dataclass(slots=True)
class Actor(Person):
    TAG: ClassVar[str] = "actor"

    role: str | None = attribute("role")
    is_guest: bool | None = attribute("guest", bool, codec=Codec.BOOLEAN)


@dataclass(slots=True)
class Writer(Person):
    TAG: ClassVar[str] = "writer"


@dataclass(slots=True)
class Adapter(Person):
    TAG: ClassVar[str] = "adapter"


@dataclass(slots=True)
class Producer(Person):
    TAG: ClassVar[str] = "producer"


@dataclass(slots=True)
class Composer(Person):
    TAG: ClassVar[str] = "composer"


@dataclass(slots=True)
class Editor(Person):
    TAG: ClassVar[str] = "editor"


@dataclass(slots=True)
class Presenter(Person):
    TAG: ClassVar[str] = "presenter"


@dataclass(slots=True)
class Commentator(Person):
    TAG: ClassVar[str] = "commentator"


@dataclass(slots=True)
class Guest(Person):
    TAG: ClassVar[str] = "guest"


@dataclass(slots=True)
class Credits:
    TAG: ClassVar[str] = "credits"

    directors: list[Director] = children("director", Director)
    actors: list[Actor] = children("actor", Actor)
    writers: list[Writer] = children("writer", Writer)
    adapters: list[Adapter] = children("adapter", Adapter)
    producers: list[Producer] = children("producer", Producer)
    composers: list[Composer] = children("composer", Composer)
    editors: list[Editor] = children("editor", Editor)
    presenters: list[Presenter] = children("presenter", Presenter)
    commentators: list[Commentator] = children("commentator", Commentator)
    guests: list[Guest] = children("guest", Guest)


@dataclass(slots=True)
class Category(LocalizedText):
    TAG: ClassVar[str] = "category"


@dataclass(slots=True)
class Keyword(LocalizedText):
    TAG: ClassVar[str] = "keyword"


@dataclass(slots=True)
class Language(LocalizedText):
    TAG: ClassVar[str] = "language"


@dataclass(slots=True)
class OriginalLanguage(LocalizedText):
    TAG: ClassVar[str] = "orig-language"


@dataclass(slots=True)
class Length:
    TAG: ClassVar[str] = "length"

    units: LengthUnits | str = attribute("units", LengthUnits, default="")
    value: int | None = chardata(int, default=None)


@dataclass(slots=True)
class Country(LocalizedText):
    TAG: ClassVar[str] = "country"


@dataclass(slots=True)
class EpisodeNumber:
    TAG: ClassVar[str] = "episode-num"

    system: str = attribute("system", default="", omit_empty=True)
    text: str = chardata()


@dataclass(slots=True)
class Aspect:
    TAG: ClassVar[str] = "aspect"

    text: str = chardata()


@dataclass(slots=True)
class Quality:
    TAG: ClassVar[str] = "quality"

    text: str = chardata()


@dataclass(slots=True)
class Video:
    TAG: ClassVar[str] = "video"

    present: bool | None = element("present", codec=Codec.BOOLEAN)
    colour: bool | None = element("colour", codec=Codec.BOOLEAN)
    aspect: Aspect | None = child("aspect", Aspect)
    quality: Quality | None = child("quality", Quality)


@dataclass(slots=True)
class Stereo:
    TAG: ClassVar[str] = "stereo"

    text: str = chardata()


@dataclass(slots=True)
class Audio:
    TAG: ClassVar[str] = "audio"

    present: bool | None = element("present", codec=Codec.BOOLEAN)
    stereo: Stereo | None = child("stereo", Stereo)


@dataclass(slots=True)
class PreviouslyShown:
    TAG: ClassVar[str] = "previously-shown"

    start: XMLTVTime | None = attribute("start", XMLTVTime, codec=Codec.DATETIME_SECONDS)
    channel: str | None = attribute("channel")


@dataclass(slots=True)
class Premiere(LocalizedText):
    TAG: ClassVar[str] = "premiere"


@dataclass(slots=True)
class LastChance(LocalizedText):
    TAG: ClassVar[str] = "last-chance"


@dataclass(slots=True)
class Subtitles:
    TAG: ClassVar[str] = "subtitles"

    type: SubtitlesType | None = attribute("type", SubtitlesType)
    language: Language | None = child("language", Language)


@dataclass(slots=True)
class Value:
    TAG: ClassVar[str] = "value"

    text: str = chardata()


@dataclass(slots=True)
class Rating:
    TAG: ClassVar[str] = "rating"

    system: str | None = attribute("system")
    value: Value | None = child("value", Value)
    icons: list[Icon] = children("icon", Icon)


@dataclass(slots=True)
class StarRating(Rating):
    TAG: ClassVar[str] = "star-rating"


@dataclass(slots=True)
class Review:
    TAG: ClassVar[str] = "review"

    type: ReviewType | None = attribute("type", ReviewType)
    source: str | None = attribute("source")
    reviewer: str | None = attribute("reviewer")
    lang: str | None = attribute("lang")
    text: str = chardata()


@dataclass(slots=True)
class Programme:
    TAG: ClassVar[str] = "programme"

    start: XMLTVTime = attribute("start", XMLTVTime, codec=Codec.DATETIME_SECONDS, default=XMLTVTime())
    stop: XMLTVTime | None = attribute("stop", XMLTVTime, codec=Codec.DATETIME_SECONDS)
    pdc_start: XMLTVTime | None = attribute("pdc-start", XMLTVTime, codec=Codec.DATETIME_SECONDS)
    vps_start: XMLTVTime | None = attribute("vps-start", XMLTVTime, codec=Codec.DATETIME_SECONDS)
    showview: str | None = attribute("showview")
    videoplus: str | None = attribute("videoplus")
    channel: str = attribute("channel", default="")
    clump_index: str | None = attribute("clumpidx")
    titles: list[Title] = children("title", Title)
    sub_titles: list[SubTitle] = children("sub-title", SubTitle)
    descriptions: list[Description] = children("desc", Description)
    credits: Credits | None = child("credits", Credits)
    date: XMLTVTime | None = element("date", codec=Codec.DATETIME_DAY)
    categories: list[Category] = children("category", Category)
    keywords: list[Keyword] = children("keyword", Keyword)
    language: Language | None = child("language", Language)
    original_language: OriginalLanguage | None = child("orig-language", OriginalLanguage)
    length: Length | None = child("length", Length)
    icons: list[Icon] = children("icon", Icon)
    urls: list[URL] = children("url", URL)
    countries: list[Country] = children("country", Country)
    episode_numbers: list[EpisodeNumber] = children("episode-num", EpisodeNumber)
    video: Video | None = child("video", Video)
    audio: Audio | None = child("audio", Audio)
    previously_shown: PreviouslyShown | None = child("previously-shown", PreviouslyShown)
    premiere: Premiere | None = child("premiere", Premiere)
    last_chance: LastChance | None = child("last-chance", LastChance)
    is_new: bool | None = element("new", codec=Codec.BOOLEAN)
    subtitles: list[Subtitles] = children("subtitles", Subtitles)
    ratings: list[Rating] = children("rating", Rating)
    star_ratings: list[StarRating] = children("star-rating", StarRating)
    reviews: list[Review] = children("review", Review)
    images: list[Image] = children("image", Image)


@dataclass(slots=True)
class TV:
    """Root element of an XMLTV document"""
    TAG: ClassVar[str] = "tv"

    date: XMLTVTime | None = attribute("date", XMLTVTime, codec=Codec.DATETIME_SECONDS)
    source_info_url: str | None = attribute("source-info-url")
    source_info_name: str | None = attribute("source-info-name")
    source_data_url: str | None = attribute("source-data-url")
    generator_info_name: str | None = attribute("generator-info-name")
    generator_info_url: str | None = attribute("generator-info-url")
    channels: list[Channel] = children("channel", Channel)
    programmes: list[Programme] = children("programme", Programme)


EPG = TV


__all__ = [
    "LengthUnits", "SubtitlesType", "ReviewType", "ImageType", "ImageSize", "ImageOrientation",
    "LocalizedText", "DisplayName", "Icon", "URL", "Image", "Channel",
    "Title", "SubTitle", "Description",
    "Person", "Director", "Actor", "Writer", "Adapter", "Producer", "Composer",
    "Editor", "Presenter", "Commentator", "Guest", "Credits",
    "Category", "Keyword", "Language", "OriginalLanguage", "Length", "Country",
    "EpisodeNumber", "Aspect", "Quality", "Video", "Stereo", "Audio",
    "PreviouslyShown", "Premiere", "LastChance", "Subtitles", "Value",
    "Rating", "StarRating", "Review", "Programme", "TV", "EPG",
]
