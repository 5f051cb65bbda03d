import pytest

from kubeglance.config import Settings, build_parser, parse_args


def test_defaults():
    settings = parse_args([])
    assert settings.tick_rate == 250
    assert settings.poll_rate == 5000
    assert settings.enhanced_graphics is True


def test_ticks_per_poll_invariant():
    settings = parse_args(["--tick-rate", "100", "--poll-rate", "700"])
    assert settings.ticks_per_poll * settings.tick_rate == settings.poll_rate


def test_short_options():
    settings = parse_args(["-t", "200", "-p", "400"])
    assert (settings.tick_rate, settings.poll_rate) == (200, 400)


def test_enhanced_graphics_values():
    assert parse_args(["-e"]).enhanced_graphics is True
    assert parse_args(["-e", "false"]).enhanced_graphics is False


def test_tick_rate_too_large():
    with pytest.raises(ValueError, match="Tick rate must be below 1000"):
        parse_args(["--tick-rate", "1000", "--poll-rate", "1000"])


def test_poll_rate_not_multiple():
    with pytest.raises(ValueError, match="Poll rate must be multiple of tick-rate"):
        parse_args(["--tick-rate", "300", "--poll-rate", "1000"])


def test_zero_tick_rate_rejected():
    with pytest.raises(ValueError):
        Settings(tick_rate=0, poll_rate=0)


def test_malformed_number_exits():
    with pytest.raises(SystemExit):
        parse_args(["--tick-rate", "fast"])


def test_negative_number_exits():
    with pytest.raises(SystemExit):
        parse_args(["--poll-rate", "-5"])


def test_bad_boolean_exits():
    with pytest.raises(SystemExit):
        parse_args(["-e", "maybe"])


def test_parser_usage_mentions_keybindings():
    parser = build_parser()
    assert "Press `?` while running the app to see keybindings" in parser.format_usage()


def test_settings_direct_matches_parsed():
    assert Settings(tick_rate=125, poll_rate=250) == parse_args(["-t", "125", "-p", "250"])