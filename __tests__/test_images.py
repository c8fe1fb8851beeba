"""
Tests for filename parsing, page lookups and gallery resolution.
"""

import pytest

from src.services.testimonies import ImageCatalog, GalleryResolver
from src.services.testimonies.images import parse_image_filename, generate_avatar_url
from src.services.testimonies.images.image_files import ALL_IMAGES, COLLAGE_FILES
from conftest import make_testimony

BASE = "/images/testimonies/"


@pytest.fixture(scope="module")
def resolver(catalog):
    return GalleryResolver(catalog)


# Filename parsing

def test_parse_conventional_filename():
    parsed = parse_image_filename("24_The Best of All of Us_1_2.jpg")

    assert parsed.page_number == 24
    assert parsed.section_title == "The Best of All of Us"
    assert parsed.section_page == 1
    assert parsed.photo_number == 2
    assert parsed.extension == "jpg"


def test_parse_quoted_section_title():
    parsed = parse_image_filename('59_"A Rare Soul"_1_1.jpg')
    assert parsed.page_number == 59
    assert parsed.section_title == '"A Rare Soul"'


@pytest.mark.parametrize("filename", [
    "80_Rishi Pal Singh_1.jpg",
    "0_Cover_1.jpg",
    "141_epilogue1_1.jpg",
    "4_Foreword_1_1.gif",
    "",
    None,
])
def test_parse_rejects_unconventional_names(filename):
    assert parse_image_filename(filename) is None


# Catalog

def test_page_lookup(catalog):
    assert catalog.get_images_for_page_number(59) == [f'{BASE}59_"A Rare Soul"_1_1.jpg']
    assert catalog.get_images_for_page_number(4) == [f"{BASE}4_Foreword_1_1.png"]


def test_page_lookup_uses_plain_string_order(catalog):
    images = catalog.get_images_for_page_number(18)

    assert len(images) == 10
    assert images[0].endswith("_11_1.jpg")
    assert images[1].endswith("_11_10.jpg")
    assert images[2].endswith("_11_2.jpg")


def test_page_lookup_case_sensitive_order(catalog):
    assert catalog.get_images_for_page_number(128) == [
        f"{BASE}128_Besan barfi_1_1.jpg",
        f"{BASE}128_besan barfi_1_2.jpg",
    ]


def test_page_lookup_misses(catalog):
    assert catalog.get_images_for_page_number(80) == []
    assert catalog.get_images_for_page_number(9999) == []
    assert catalog.get_images_for_page_number("4") == []
    assert catalog.get_images_for_page_number(True) == []


def test_page_range_lookup(catalog):
    images = catalog.get_images_for_page_range(24, 25)

    assert images == [
        f"{BASE}24_The Best of All of Us_1_1.jpg",
        f"{BASE}24_The Best of All of Us_1_2.jpg",
        f"{BASE}25_The Best of All of Us_2_1.jpg",
    ]
    assert catalog.get_images_for_page_range(25, 24) == []


def test_all_images_include_unconventional_names(catalog):
    images = catalog.get_all_images()
    assert len(images) == len(ALL_IMAGES)
    assert f"{BASE}80_Rishi Pal Singh_1.jpg" in images


def test_section_lookup(catalog):
    images = catalog.get_images_for_section("Best of All")

    assert [image.id for image in images] == [
        "24_The Best of All of Us_1_1",
        "24_The Best of All of Us_1_2",
        "25_The Best of All of Us_2_1",
    ]
    assert images[0].testimony_id == "best-of-all"
    assert images[0].alt == "Best of All - Photo 1"
    assert images[2].caption == "Page 25, Section 2"


def test_section_lookup_orders_by_section_page_then_photo():
    catalog = ImageCatalog(filenames=[
        "12_Garden Days_2_1.jpg",
        "10_Garden Days_1_3.jpg",
        "10_Garden Days_1_1.jpg",
    ])
    images = catalog.get_images_for_section("garden days")
    assert [image.id for image in images] == [
        "10_Garden Days_1_1", "10_Garden Days_1_3", "12_Garden Days_2_1",
    ]


def test_section_lookup_empty_title(catalog):
    assert catalog.get_images_for_section("") == []
    assert catalog.get_images_for_section("   ") == []
    assert catalog.get_images_for_section(None) == []


def test_custom_base_path():
    catalog = ImageCatalog(filenames=["3_Intro_1_1.jpg"], base_path="/static")
    assert catalog.get_images_for_page_number(3) == ["/static/3_Intro_1_1.jpg"]
    assert catalog.get_page_numbers() == [3]


def test_collage_images(catalog):
    collage = catalog.get_collage_images()
    assert len(collage) == len(COLLAGE_FILES)
    assert all(image.caption == "Family memories" and image.width == 400 for image in collage)


# Gallery resolution

def test_curated_images_win(resolver, corpus_by_id):
    gallery = resolver.get_gallery_images(corpus_by_id["bond-beyond-blood"])

    assert len(gallery) == 1
    assert gallery[0].id == "bond-beyond-blood-cms-0"
    assert gallery[0].alt == "A Bond Beyond Blood - Image 1"
    assert gallery[0].caption == "Tony Bhaiya with the Mittal family"


def test_curated_caption_falls_back_to_filename_page(resolver):
    testimony = make_testimony(id="x", page=2, images=[f"{BASE}73_Some Section_2_1.png", "/uploads/photo.jpg"])
    gallery = resolver.get_gallery_images(testimony)

    assert gallery[0].caption == "From page 73 of the magazine"
    assert gallery[1].caption == "From page 2 of the magazine"


def test_page_range_images(resolver, corpus_by_id):
    gallery = resolver.get_gallery_images(corpus_by_id["best-of-all-of-us"])

    assert [image.id for image in gallery] == [
        "best-of-all-of-us-page-24-0",
        "best-of-all-of-us-page-24-1",
        "best-of-all-of-us-page-25-0",
    ]
    assert gallery[2].caption == "From page 25 of the magazine"
    assert gallery[0].alt == "The Best of All of Us - Photo from page 24"


def test_story_page_mapping_images(resolver, corpus_by_id):
    testimony = corpus_by_id["hum-do-humare-char"]

    assert resolver.get_pages_for_testimony(testimony) == [8, 9, 10]
    assert len(resolver.get_gallery_images(testimony)) == 10


def test_single_page_fallback(resolver, corpus_by_id):
    testimony = corpus_by_id["rare-soul"]

    assert resolver.get_pages_for_testimony(testimony) == [59]
    assert [image.src for image in resolver.get_gallery_images(testimony)] == [f'{BASE}59_"A Rare Soul"_1_1.jpg']


def test_no_images_resolves_to_empty_gallery(resolver, corpus_by_id):
    assert resolver.get_gallery_images(corpus_by_id["ac-lagwa-dein"]) == []


def test_legacy_section_tier(catalog):
    resolver = GalleryResolver(catalog, story_page_mappings={})
    testimony = make_testimony(id="foreword", title="Opening Words", page=9999)

    gallery = resolver.get_gallery_images(testimony)
    assert gallery
    assert all("Foreword" in image.src for image in gallery)


def test_legacy_title_tier():
    catalog = ImageCatalog(filenames=["50_Garden Days_1_1.jpg"])
    resolver = GalleryResolver(catalog, story_page_mappings={})
    testimony = make_testimony(id="garden", title="Garden Days", page=9999)

    assert [image.src for image in resolver.get_gallery_images(testimony)] == [f"{BASE}50_Garden Days_1_1.jpg"]


def test_collage_tier(catalog):
    resolver = GalleryResolver(catalog, story_page_mappings={})
    testimony = make_testimony(id="collage", title="Collage", page=9999)
    assert len(resolver.get_gallery_images(testimony)) == len(COLLAGE_FILES)


def test_profile_image_is_avatar(resolver, corpus_by_id):
    sources = resolver.get_image_sources(corpus_by_id["rare-soul"])

    assert sources.profile_image == generate_avatar_url("Rakesh Sharma")
    assert len(sources.gallery_images) == 1
    dumped = sources.model_dump(by_alias=True)
    assert set(dumped) == {"profileImage", "galleryImages"}
    assert dumped["galleryImages"][0]["testimonyId"] == "rare-soul"


def test_avatar_url():
    url = generate_avatar_url("Rakesh Sharma")

    assert url.startswith("data:image/svg+xml,")
    assert "RS%3C/text%3E" in url
    assert "%23a855f7" in url
    assert "width='100'" in url
    assert "font-size='40'" in url


def test_avatar_url_is_deterministic_and_sized():
    assert generate_avatar_url("Geeta Batra", 64) == generate_avatar_url("Geeta Batra", 64)
    assert "width='64'" in generate_avatar_url("Geeta Batra", 64)
    assert "%3C/text%3E" in generate_avatar_url("")
