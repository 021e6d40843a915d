from pathlib import Path

import pytest

from randmac import Application


REGISTRY_CSV = """\
Registry,Assignment,Organization Name,Organization Address
MA-L,002272,American Micro-Fuel Device Corp.,2181 Buchanan Loop Ferndale WA US 98248 
MA-L,00D0EF,IGT,9295 PROTOTYPE DRIVE RENO NV US 89511 
MA-L,ACDE48,"Acme Widgets, Inc.","1 Road Springfield, IL US 62701 "
MA-L,086195,Rockwell Automation,1 Allen-Bradley Dr. Mayfield Heights OH US 44124 
MA-L,F4545B,Rockwell Automation,1 Allen-Bradley Dr. Mayfield Heights OH US 44124 
MA-L,5CF8A1,Not Acme Ltd,Somewhere GB 
MA-M,70B3D5A,Acme Medium Block,Nowhere US 
MA-L,ZZZZZZ,Acme Broken Row,Nowhere US 
"""


@pytest.fixture(autouse=True)
def _fresh_app():
    Application.reset()
    yield
    Application.reset()


@pytest.fixture
def registry(tmp_path: Path) -> Path:
    path = tmp_path / "oui.csv"
    path.write_text(REGISTRY_CSV, encoding="utf-8")
    return path


@pytest.fixture
def app(registry: Path) -> Application:
    app = Application.current()
    app.registry_path = registry
    return app
