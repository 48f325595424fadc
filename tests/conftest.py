import pytest
from pathlib import Path

from datparser import config


BRICK_3001 = """0 Brick  2 x  4
0 Name: 3001.dat
0 Author: James Jessiman
0 !LDRAW_ORG Part UPDATE 2004-03
0 !LICENSE Redistributable under CCAL version 2.0 : see CAreadme.txt

0 BFC CERTIFY CCW

0 !HISTORY 2002-08-18 [PTadmin] Official Update 2002-03
0 !KEYWORDS brick, 2x4

1 16 0 4 0 1 0 0 0 -5 0 0 0 1 stud4.dat
1 16 0 24 0 1 0 0 0 -1 0 0 0 1 box5.dat
4 16 40 24 20 -40 24 20 -40 24 -20 40 24 -20
1 16 0 4 0 1 0 0 0 -5 0 0 0 1 stud4.dat
"""

ALIAS_3001A = """0 =Brick  2 x  4
0 Name: 3001a.dat
0 Author: Steve Bliss [sbliss]
0 !LDRAW_ORG Part Alias UPDATE 2003-01
1 16 0 0 0 1 0 0 0 1 0 0 0 1 3001.dat
"""

PRINTED_3001P01 = """0 Brick 2 x 4 with Pattern
0 Name: 3001p01.dat
0 !LDRAW_ORG Part UPDATE 2010-02
1 16 0 0 0 1 0 0 0 1 0 0 0 1 3001.dat
1 16 0 0 0 -1 0 0 0 1 0 0 0 1 3001p01a.dat
"""

MOVED_3001B = """0 ~Moved to 3001
0 Name: 3001b.dat
0 !LDRAW_ORG Part UPDATE 2005-01
1 16 0 0 0 1 0 0 0 1 0 0 0 1 3001.dat
"""


@pytest.fixture
def ldraw_lib(tmp_path, monkeypatch) -> Path:
    """A small LDraw library with parts/, parts/s/ and p/ directories."""
    (tmp_path / "parts" / "s").mkdir(parents=True)
    (tmp_path / "p").mkdir()

    parts = tmp_path / "parts"
    (parts / "3001.dat").write_text(BRICK_3001)
    (parts / "3001a.dat").write_text(ALIAS_3001A)
    (parts / "3001p01.dat").write_text(PRINTED_3001P01)
    (parts / "3001b.dat").write_text(MOVED_3001B)
    (parts / "s" / "3001s01.dat").write_text("0 ~Brick 2 x 4 without Front\n0 Name: s\\3001s01.dat\n")
    (tmp_path / "p" / "stud4.dat").write_text("0 Stud Tube Open\n0 Name: stud4.dat\n0 !LDRAW_ORG Primitive UPDATE 2012-01\n")

    monkeypatch.setattr(config, "LDRAW_PATH", tmp_path)
    return tmp_path
