import pytest
from datparser.grammars import (
    FieldUpdate,
    get_referenced_model_number,
    parse_author,
    parse_category,
    parse_first_line,
    parse_keywords,
    parse_ldraw_org,
    parse_name,
    parse_revision,
)
from datparser.record import Revision


class TestFirstLine:
    def test_category_and_name(self):
        updates = parse_first_line("Brick 2 x 4")
        assert FieldUpdate("category", "Brick") in updates
        assert FieldUpdate("name", "Brick 2 x 4", once=True) in updates

    def test_collapses_spaces_in_name_only(self):
        updates = dict((u.field, u.value) for u in parse_first_line("Brick  2 x   4"))
        assert updates["name"] == "Brick 2 x 4"
        assert updates["category"] == "Brick"

    def test_leading_markers(self):
        updates = dict((u.field, u.value) for u in parse_first_line("=Brick 2 x 4"))
        assert updates["name"] == "Brick 2 x 4"
        assert updates["category"] == "Brick"

        updates = dict((u.field, u.value) for u in parse_first_line("_Brick 2 x 4"))
        assert updates["name"] == "Brick 2 x 4"

    def test_category_is_first_whitespace_token(self):
        updates = dict((u.field, u.value) for u in parse_first_line(" Brick 2 x 4"))
        assert updates["category"] == "Brick"
        assert updates["name"] == "Brick 2 x 4"

        updates = dict((u.field, u.value) for u in parse_first_line("Brick\t2 x 4"))
        assert updates["category"] == "Brick"

    def test_blank_first_line_sets_no_category(self):
        updates = parse_first_line("  ")
        assert [u.field for u in updates] == ["name"]

    def test_tilde_kept_in_name_but_not_category(self):
        # The resolver relies on the leading ~ of obsolete descriptions
        updates = dict((u.field, u.value) for u in parse_first_line("~Moved to 3070a"))
        assert updates["name"] == "~Moved to 3070a"
        assert updates["category"] == "Moved"


class TestHeaderGrammars:
    def test_category(self):
        assert parse_category("!CATEGORY  Minifig Accessory ") == [FieldUpdate("category", "Minifig Accessory")]
        assert parse_category("!CATEGORYBrick") is None

    def test_keywords_split_on_comma_space(self):
        [update] = parse_keywords("!KEYWORDS Bricklink 3001, 2x4,brick")
        assert update.value == ["Bricklink 3001", "2x4,brick"]

    def test_name_strips_dat(self):
        assert parse_name("Name: 3001.dat") == [FieldUpdate("id", "3001", once=True)]
        assert parse_name("Name: s\\3001s01.dat") == [FieldUpdate("id", "s\\3001s01", once=True)]

    def test_name_upper_case_extension_kept(self):
        # Name: only strips lowercase .dat while references accept .DAT too
        assert parse_name("Name: 3001.DAT") == [FieldUpdate("id", "3001.DAT", once=True)]

    def test_name_requires_prefix(self):
        assert parse_name("Name:3001.dat") is None

    def test_author(self):
        assert parse_author("Author: James Jessiman") == [FieldUpdate("author", "James Jessiman")]
        assert parse_author("Author:") is None

    def test_ldraw_org_with_date(self):
        updates = parse_ldraw_org("!LDRAW_ORG Part UPDATE 2004-03")
        assert FieldUpdate("type", "Part") in updates
        assert FieldUpdate("modified", Revision(2004, "03")) in updates

    def test_ldraw_org_qualified_type(self):
        updates = parse_ldraw_org("!LDRAW_ORG Shortcut Physical_Colour ORIGINAL 1996-01")
        assert updates[0] == FieldUpdate("type", "Shortcut Physical_Colour")
        assert updates[1] == FieldUpdate("modified", Revision(1996, "01"))

    def test_ldraw_org_without_date(self):
        assert parse_ldraw_org("!LDRAW_ORG Part ORIGINAL") == [FieldUpdate("type", "Part")]

    def test_ldraw_org_unofficial(self):
        assert parse_ldraw_org("!LDRAW_ORG Unofficial_Part") == [FieldUpdate("type", "Unofficial_Part")]

    @pytest.mark.parametrize("token,expected", [
        ("1996-01", Revision(1996, "01")),
        ("2004-99", Revision(2004, "99")),
        ("0996-01", None),
        ("1996-1", None),
        ("1996-01a", None),
    ])
    def test_revision(self, token, expected):
        assert parse_revision(token) == expected


class TestReferenceLine:
    def test_reference(self):
        assert get_referenced_model_number("1 4 0 0 0 1 0 0 0 1 0 0 0 1 3001.dat") == "3001"

    def test_reference_upper_case(self):
        assert get_referenced_model_number("1 4 0 0 0 1 0 0 0 1 0 0 0 1 3001.DAT") == "3001"

    def test_reference_subfile(self):
        assert get_referenced_model_number("1 16 0 0 0 1 0 0 0 1 0 0 0 1 s\\3001s01.dat") == "s\\3001s01"

    def test_identity_placement_excluded(self):
        assert get_referenced_model_number("1 16 0 0 0 -1 0 0 0 1 0 0 0 1 4-4cyli.dat") is None

    def test_non_identity_counted(self):
        assert get_referenced_model_number("1 16 0 0 0 1 0 0 0 1 0 0 0 1 4-4cyli.dat") == "4-4cyli"

    def test_non_dat_reference(self):
        assert get_referenced_model_number("1 16 0 0 0 1 0 0 0 1 0 0 0 1 model.ldr") is None
