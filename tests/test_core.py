"""Core tests for ansipaint module."""
# std imports
import importlib.metadata as importmeta

# local
import ansipaint


def test_package_version():
    """ansipaint.__version__ is expected value."""
    # given,
    expected = importmeta.version('ansipaint')

    # exercise,
    result = ansipaint.__version__

    # verify.
    assert result == expected


def test_default_engine_functions():
    """Module-level functions are bound to the default engine."""
    assert ansipaint.paint.__self__ is ansipaint.ansi
    assert ansipaint.resolve.__self__ is ansipaint.ansi
    assert ansipaint.palette is ansipaint.ansi.palette


def test_default_engine_disabled_until_setup(monkeypatch):
    """The default engine renders nothing until setup() is called."""
    # given,
    monkeypatch.setattr(ansipaint.ansi.config, 'enabled', False)

    # exercise,
    before = ansipaint.paint('${bold}x')
    ansipaint.setup()
    after = ansipaint.paint('${bold}x')

    # verify.
    assert before == 'x'
    assert after == '\x1b[0;10m\x1b[1mx\x1b[0;10m'


def test_default_engine_no_paint():
    """no_paint() strips regardless of the enabled flag."""
    assert ansipaint.no_paint('${fg_red}x\x1b[0m') == 'x'


def test_style_shortcut():
    """style() starts a builder on the default engine."""
    assert ansipaint.style('bold').expression == 'bold'
