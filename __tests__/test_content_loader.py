"""
Tests for corpus loading from JSON and from the database tables.
"""

import asyncio
import json

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.database import Base
from src.models import testimony_models  # noqa: F401
from src.services.testimonies import ContentLoader, ContentStore, TestimonyValidator
from src.services.testimonies.base import InvalidTestimonyError
from src.services.testimonies.content import CorpusLoadError


def _write_json(tmp_path, data):
    path = tmp_path / "testimonies.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


VALID = {"id": "one", "title": "One", "content": "First entry", "page": 3}


# Normalization

def test_normalize_fills_defaults():
    testimony = TestimonyValidator().normalize_testimony(dict(VALID, author=None, pageRange={}))

    assert testimony.author == ""
    assert testimony.relationship == ""
    assert testimony.tags == []
    assert testimony.images is None
    assert testimony.images_captions == {}
    assert testimony.page_range is None


def test_normalize_reads_camel_case_fields():
    raw = dict(VALID, pageRange={"start": 3, "end": 5}, imagesCaptions={"/a.jpg": "Caption"}, images=["/a.jpg"])
    testimony = TestimonyValidator().normalize_testimony(raw)

    assert testimony.page_range.start == 3
    assert testimony.page_range.end == 5
    assert testimony.images_captions == {"/a.jpg": "Caption"}


@pytest.mark.parametrize("raw", [
    {"title": "No id", "content": "x", "page": 1},
    dict(VALID, page=None),
    dict(VALID, page="three"),
    dict(VALID, page=True),
    dict(VALID, tags="not-a-list"),
    "not an object",
])
def test_normalize_rejects_invalid_records(raw):
    with pytest.raises(InvalidTestimonyError):
        TestimonyValidator().normalize_testimony(raw, 0)


def test_invalid_record_error_names_location():
    with pytest.raises(InvalidTestimonyError) as exc_info:
        TestimonyValidator().normalize_testimony({"id": "bad", "title": "Bad", "page": 1}, 4)
    assert "record 4" in str(exc_info.value)
    assert "'bad'" in str(exc_info.value)
    assert exc_info.value.index == 4


# JSON source

def test_bundled_corpus_loads(corpus):
    assert len(corpus) == 12
    assert corpus[0].id == "foreword"


def test_lenient_load_skips_invalid(tmp_path):
    path = _write_json(tmp_path, [VALID, {"id": "broken"}, dict(VALID, id="two")])
    loader = ContentLoader(data_file_path=path, source="json", strict=False)

    testimonies = asyncio.run(loader.load_testimonies())

    assert [t.id for t in testimonies] == ["one", "two"]
    assert len(loader.get_load_errors()) == 1
    assert loader.get_last_loaded_time() is not None


def test_strict_load_raises(tmp_path):
    path = _write_json(tmp_path, [VALID, {"id": "broken"}])
    loader = ContentLoader(data_file_path=path, source="json", strict=True)

    with pytest.raises(InvalidTestimonyError):
        asyncio.run(loader.load_testimonies())


def test_duplicates_are_kept(tmp_path):
    path = _write_json(tmp_path, [VALID, dict(VALID, title="Again")])
    testimonies = ContentLoader(data_file_path=path, source="json").load_testimonies_from_file()
    assert [t.title for t in testimonies] == ["One", "Again"]


def test_missing_file(tmp_path):
    loader = ContentLoader(data_file_path=str(tmp_path / "absent.json"), source="json")
    with pytest.raises(CorpusLoadError):
        asyncio.run(loader.load_testimonies())
    assert loader.get_file_info()["file_exists"] is False


def test_malformed_and_non_array_files(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(CorpusLoadError):
        ContentLoader(data_file_path=str(bad), source="json").load_testimonies_from_file()

    path = _write_json(tmp_path, {"testimonies": []})
    with pytest.raises(CorpusLoadError):
        ContentLoader(data_file_path=path, source="json").load_testimonies_from_file()


def test_unsupported_source():
    with pytest.raises(CorpusLoadError):
        ContentLoader(source="yaml")


# Database source

async def _round_trip(db_url, testimonies):
    engine = create_async_engine(db_url, poolclass=NullPool)
    sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with sessions() as session:
            counts = await ContentStore(session).import_testimonies(testimonies)

        async with sessions() as session:
            loaded = await ContentLoader(source="database").load_testimonies(session)

        # Importing again replaces the previous rows
        async with sessions() as session:
            again = await ContentStore(session).import_testimonies(testimonies[:2])
        async with sessions() as session:
            reloaded = await ContentLoader(source="database").load_testimonies(session)
    finally:
        await engine.dispose()
    return counts, loaded, again, reloaded


def test_database_round_trip(tmp_path, corpus):
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'roundtrip.db'}"
    counts, loaded, again, reloaded = asyncio.run(_round_trip(db_url, corpus))

    assert counts == {"testimonies": 12, "images": 1, "links": 1}
    assert [t.id for t in loaded] == [t.id for t in sorted(corpus, key=lambda t: (t.page, t.id))]

    by_id = {t.id: t for t in loaded}
    original = {t.id: t for t in corpus}
    assert by_id["bond-beyond-blood"].images == original["bond-beyond-blood"].images
    assert by_id["bond-beyond-blood"].images_captions == original["bond-beyond-blood"].images_captions
    assert by_id["best-of-all-of-us"].page_range == original["best-of-all-of-us"].page_range
    assert by_id["besan-barfi"].tags == ["cooking", "recipe", "sweets"]
    assert by_id["rare-soul"].images is None

    assert again["testimonies"] == 2
    assert len(reloaded) == 2


def test_image_row_metadata_from_filename():
    row = ContentStore.build_image_row("/images/testimonies/24_The Best of All of Us_1_2.jpg")
    assert row.filename == "24_The Best of All of Us_1_2.jpg"
    assert row.page == 24
    assert row.section_title == "The Best of All of Us"
    assert row.photo_number == 2
    assert row.is_page_based is True

    legacy = ContentStore.build_image_row("/images/testimonies/80_Rishi Pal Singh_1.jpg")
    assert legacy.page is None
    assert legacy.is_page_based is False
