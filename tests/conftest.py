# -*- coding: utf-8 -*-
"""Pytest fixtures for OpeningsTools tests."""
import json
import os
import sys
import tempfile
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "OpeningsTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


if "pyrevit" not in sys.modules:
    pyrevit_stub = types.ModuleType("pyrevit")
    from mocks.revit_api import DB as MockDB
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub


from mocks.revit_api import (  # noqa: E402
    MockApplication,
    MockDocument,
    MockLevel,
    MockView3D,
    MockWall,
    mock_duct,
    mock_opening_symbol,
    mock_pipe,
)

WIDTH_PARAM = u"ADSK_Отверстие_Ширина"
HEIGHT_PARAM = u"ADSK_Отверстие_Высота"


@pytest.fixture
def temp_config_file():
    """Create a temporary config file and return its path. Cleans up after test."""
    files = []

    def _create(data, bom=False):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False,
                                        encoding='utf-8-sig' if bom else 'utf-8')
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def rules():
    import config_loader
    return dict(config_loader.DEFAULTS)


@pytest.fixture
def opening_scene():
    """Architecture doc with two walls and a mechanical doc with one duct and one pipe.

    Duct runs along X at Y=0 (10 ft, D=0.5 ft), pipe along X at Y=5 (10 ft, D=0.1 ft).
    """
    level = MockLevel(elevation=0.0, element_id=1)
    wall_a = MockWall(element_id=10, level_id=level.Id)
    wall_b = MockWall(element_id=11, level_id=level.Id)
    symbol = mock_opening_symbol()
    view = MockView3D(is_template=False, element_id=20)
    template = MockView3D(is_template=True, element_id=21)

    arch = MockDocument(u"Проект_АР", elements=[level, wall_a, wall_b, symbol, template, view])
    arch.Create.instance_params = (WIDTH_PARAM, HEIGHT_PARAM)

    duct = mock_duct((0, 0, 0), (10, 0, 0), diameter=0.5, element_id=100)
    pipe = mock_pipe((0, 5, 0), (10, 5, 0), diameter=0.1, element_id=200)
    mech = MockDocument(u"Проект_ОВ", elements=[duct, pipe])

    app = MockApplication([arch, mech])
    arch.Application = app

    return types.SimpleNamespace(
        arch=arch, mech=mech, app=app, level=level,
        wall_a=wall_a, wall_b=wall_b, symbol=symbol, view=view,
        duct=duct, pipe=pipe,
    )
