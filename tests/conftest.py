"""
Pytest configuration and fixtures for XMLTV tests.
"""
from datetime import datetime, timedelta, timezone

import pytest

from xmltv import (
    TV, Actor, Adapter, Audio, Aspect, Category, Channel, Commentator, Composer,
    Country, Credits, Description, Director, DisplayName, Editor, EpisodeNumber,
    Guest, Icon, Image, ImageOrientation, ImageSize, ImageType, Keyword,
    Language, LastChance, Length, LengthUnits, OriginalLanguage, Premiere,
    Presenter, PreviouslyShown, Producer, Programme, Quality, Rating, Review,
    ReviewType, StarRating, Stereo, SubTitle, Subtitles, SubtitlesType, Title,
    URL, Value, Video, Writer, XMLTVTime,
)


def at(year, month, day, hour=0, minute=0, second=0, offset_minutes=0) -> XMLTVTime:
    tz = timezone(timedelta(minutes=offset_minutes))
    return XMLTVTime(datetime(year, month, day, hour, minute, second, tzinfo=tz))


REFERENCE_XML = (
    '<tv date="20220401000000 +0000" source-info-url="example.com" source-info-name="example"'
    ' source-data-url="example.com/a" generator-info-name="Example Generator"'
    ' generator-info-url="https://example.com">'
    '<channel id="channel-one.tv">'
    '<display-name lang="en">Channel One</display-name>'
    '<display-name>Chaîne un</display-name>'
    '<icon src="https://example.com/channel_one_icon.jpg" width="100" height="100"/>'
    '<url system="example">https://example.com/channel_one</url>'
    '</channel>'
    '<programme start="20220331180000 +0000" stop="20220331190000 +0000"'
    ' pdc-start="20220331180000 +0000" vps-start="20220331200000 +0200"'
    ' showview="12345" videoplus="67890" channel="channel-one.tv" clumpidx="0/1">'
    '<title lang="en">Programme One</title>'
    '<sub-title lang="en">Pilot</sub-title>'
    '<desc lang="en">This programme entry showcases all possible features of the DTD</desc>'
    "<desc lang=\"cy\">Mae'r cofnod rhaglen hwn yn arddangos holl nodweddion posibl y DTD</desc>"
    '<credits>'
    '<director>Samuel Jones</director>'
    '<actor role="Walter Johnson">David Thompson</actor>'
    '<actor role="Karl James" guest="yes">'
    '<image type="person">https://example.com/xxx.jpg</image>'
    '<url system="moviedb">https://example.com/person/204</url>'
    'Ryan Lee</actor>'
    '<writer>Samuel Jones</writer>'
    '<adapter>William Brown</adapter>'
    '<producer>Emily Davis</producer>'
    '<composer>Max Wright</composer>'
    '<editor>Nora Peterson</editor>'
    '<presenter>Amanda Johnson</presenter>'
    '<commentator>James Wilson</commentator>'
    '<guest>Lucas Martin</guest>'
    '<guest>Emily Parker</guest>'
    '</credits>'
    '<date>19901011</date>'
    '<category lang="en">Comedy</category>'
    '<category lang="en">Drama</category>'
    '<keyword lang="en">physical-comedy</keyword>'
    '<language>English</language>'
    '<orig-language lang="en">French</orig-language>'
    '<length units="minutes">60</length>'
    '<icon src="https://example.com/programme_one_icon.jpg" width="100" height="100"/>'
    '<url system="imdb">https://example.com/programme_one</url>'
    '<url>https://example.com/programme_one_2</url>'
    '<country>US</country>'
    '<episode-num system="onscreen">S01E01</episode-num>'
    '<episode-num system="xmltv_ns">1 . 1 . 0/1</episode-num>'
    '<video><present>yes</present><colour>no</colour><aspect>16:9</aspect><quality>HDTV</quality></video>'
    '<audio><present>yes</present><stereo>Dolby Digital</stereo></audio>'
    '<previously-shown start="20220331180000 +0000" channel="channel-two.tv"/>'
    '<premiere>First time on British TV</premiere>'
    '<last-chance lang="en">Last time on this channel</last-chance>'
    '<new/>'
    '<subtitles type="teletext"><language>English</language></subtitles>'
    '<subtitles type="onscreen"><language lang="en">Spanish</language></subtitles>'
    '<rating system="BBFC"><value>15</value></rating>'
    '<rating system="MPAA"><value>NC-17</value><icon src="NC-17_symbol.png"/></rating>'
    '<star-rating system="TV Guide"><value>4/5</value><icon src="stars.png"/></star-rating>'
    '<star-rating system="IMDB"><value>8/10</value></star-rating>'
    '<review type="text" source="Rotten Tomatoes" reviewer="Joe Bloggs" lang="en">This is a fantastic show!</review>'
    '<review type="url" source="Rotten Tomatoes" reviewer="Joe Bloggs" lang="en">https://example.com/programme_one_review</review>'
    '<image type="poster" size="1" orient="P" system="tvdb">https://tvdb.com/programme_one_poster_1.jpg</image>'
    '<image type="backdrop" size="3" orient="L" system="tmdb">https://tmdb.com/programme_one_backdrop_3.jpg</image>'
    '</programme>'
    '<programme start="20220331180000 +0000" channel="channel-one.tv">'
    '<title>Programme Two: The minimum valid programme</title>'
    '</programme>'
    '</tv>'
).encode("utf-8")


def build_reference_tv() -> TV:
    maximal = Programme(
        start=at(2022, 3, 31, 18),
        stop=at(2022, 3, 31, 19),
        pdc_start=at(2022, 3, 31, 18),
        vps_start=at(2022, 3, 31, 20, offset_minutes=120),
        showview="12345",
        videoplus="67890",
        channel="channel-one.tv",
        clump_index="0/1",
        titles=[Title(lang="en", text="Programme One")],
        sub_titles=[SubTitle(lang="en", text="Pilot")],
        descriptions=[
            Description(lang="en", text="This programme entry showcases all possible features of the DTD"),
            Description(lang="cy", text="Mae'r cofnod rhaglen hwn yn arddangos holl nodweddion posibl y DTD"),
        ],
        credits=Credits(
            directors=[Director(text="Samuel Jones")],
            actors=[
                Actor(role="Walter Johnson", text="David Thompson"),
                Actor(
                    role="Karl James",
                    is_guest=True,
                    images=[Image(type=ImageType.PERSON, text="https://example.com/xxx.jpg")],
                    urls=[URL(system="moviedb", text="https://example.com/person/204")],
                    text="Ryan Lee",
                ),
            ],
            writers=[Writer(text="Samuel Jones")],
            adapters=[Adapter(text="William Brown")],
            producers=[Producer(text="Emily Davis")],
            composers=[Composer(text="Max Wright")],
            editors=[Editor(text="Nora Peterson")],
            presenters=[Presenter(text="Amanda Johnson")],
            commentators=[Commentator(text="James Wilson")],
            guests=[Guest(text="Lucas Martin"), Guest(text="Emily Parker")],
        ),
        date=at(1990, 10, 11),
        categories=[Category(lang="en", text="Comedy"), Category(lang="en", text="Drama")],
        keywords=[Keyword(lang="en", text="physical-comedy")],
        language=Language(text="English"),
        original_language=OriginalLanguage(lang="en", text="French"),
        length=Length(units=LengthUnits.MINUTES, value=60),
        icons=[Icon(source="https://example.com/programme_one_icon.jpg", width=100, height=100)],
        urls=[
            URL(system="imdb", text="https://example.com/programme_one"),
            URL(text="https://example.com/programme_one_2"),
        ],
        countries=[Country(text="US")],
        episode_numbers=[
            EpisodeNumber(system="onscreen", text="S01E01"),
            EpisodeNumber(system="xmltv_ns", text="1 . 1 . 0/1"),
        ],
        video=Video(present=True, colour=False, aspect=Aspect(text="16:9"), quality=Quality(text="HDTV")),
        audio=Audio(present=True, stereo=Stereo(text="Dolby Digital")),
        previously_shown=PreviouslyShown(start=at(2022, 3, 31, 18), channel="channel-two.tv"),
        premiere=Premiere(text="First time on British TV"),
        last_chance=LastChance(lang="en", text="Last time on this channel"),
        is_new=True,
        subtitles=[
            Subtitles(type=SubtitlesType.TELETEXT, language=Language(text="English")),
            Subtitles(type=SubtitlesType.ONSCREEN, language=Language(lang="en", text="Spanish")),
        ],
        ratings=[
            Rating(system="BBFC", value=Value(text="15")),
            Rating(system="MPAA", value=Value(text="NC-17"), icons=[Icon(source="NC-17_symbol.png")]),
        ],
        star_ratings=[
            StarRating(system="TV Guide", value=Value(text="4/5"), icons=[Icon(source="stars.png")]),
            StarRating(system="IMDB", value=Value(text="8/10")),
        ],
        reviews=[
            Review(type=ReviewType.TEXT, source="Rotten Tomatoes", reviewer="Joe Bloggs", lang="en",
                   text="This is a fantastic show!"),
            Review(type=ReviewType.URL, source="Rotten Tomatoes", reviewer="Joe Bloggs", lang="en",
                   text="https://example.com/programme_one_review"),
        ],
        images=[
            Image(type=ImageType.POSTER, size=ImageSize.SMALL, orientation=ImageOrientation.PORTRAIT,
                  system="tvdb", text="https://tvdb.com/programme_one_poster_1.jpg"),
            Image(type=ImageType.BACKDROP, size=ImageSize.LARGE, orientation=ImageOrientation.LANDSCAPE,
                  system="tmdb", text="https://tmdb.com/programme_one_backdrop_3.jpg"),
        ],
    )

    minimal = Programme(
        start=at(2022, 3, 31, 18),
        channel="channel-one.tv",
        titles=[Title(text="Programme Two: The minimum valid programme")],
    )

    return TV(
        date=at(2022, 4, 1),
        source_info_url="example.com",
        source_info_name="example",
        source_data_url="example.com/a",
        generator_info_name="Example Generator",
        generator_info_url="https://example.com",
        channels=[
            Channel(
                id="channel-one.tv",
                display_names=[DisplayName(lang="en", text="Channel One"), DisplayName(text="Chaîne un")],
                icons=[Icon(source="https://example.com/channel_one_icon.jpg", width=100, height=100)],
                urls=[URL(system="example", text="https://example.com/channel_one")],
            ),
        ],
        programmes=[maximal, minimal],
    )


@pytest.fixture
def reference_xml() -> bytes:
    """The reference document, exactly as dumps() writes it."""
    return REFERENCE_XML


@pytest.fixture
def reference_tv() -> TV:
    """In-memory form of the reference document."""
    return build_reference_tv()


@pytest.fixture
def reference_file(reference_xml, tmp_path):
    """Create a temporary XMLTV file holding the reference document."""
    path = tmp_path / "guide.xml"
    path.write_bytes(reference_xml)
    return path
