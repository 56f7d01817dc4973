import re
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT_DIR / "habit_tracker"
ROUTERS_DIR = PACKAGE_DIR / "web" / "routers"


def test_routers_delegate_to_handlers_without_touching_models():
    for router_file in ROUTERS_DIR.glob("*_router.py"):
        source = router_file.read_text(encoding="utf-8")
        assert re.search(r"^\s*from\s+habit_tracker\.models\b", source, flags=re.MULTILINE) is None
        assert "web_handlers." in source


def test_package_init_has_no_application_side_effect_import():
    package_init = (PACKAGE_DIR / "__init__.py").read_text(encoding="utf-8")
    assert ".application import" not in package_init


def test_asgi_entrypoint_exports_application_symbols():
    asgi_entrypoint = (PACKAGE_DIR / "asgi.py").read_text(encoding="utf-8")
    assert "from .application import create_app" in asgi_entrypoint


def test_category_labels_defined_once():
    literal = re.compile(r"""["']exercise["']""")
    offenders = [
        path.relative_to(ROOT_DIR).as_posix()
        for path in PACKAGE_DIR.rglob("*.py")
        if literal.search(path.read_text(encoding="utf-8"))
    ]
    assert offenders == ["habit_tracker/models/category.py"]
