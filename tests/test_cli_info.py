from kubeglance.cli_info import (
    CliInfo,
    build_cli,
    format_prefixed_version,
    get_info_by_regex,
    parse_kubectl_versions,
)


def test_get_info_by_regex_helm():
    text = (
        'Client: &version.Version{SemVer:"v2.17.0", '
        'GitCommit:"a690bad98af45b015bd3da1a41f6218b1a451dbe", '
        'GitTreeState:"clean"} \n Error: could not find tiller\n'
    )
    assert get_info_by_regex(text, r"(v[0-9.]+)") == "v2.17.0"


def test_get_info_by_regex_istio():
    text = 'no running Istio pods in "istio-system"\n1.8.2\n'
    assert get_info_by_regex(text, r"([0-9.]+)") == "1.8.2"


def test_get_info_by_regex_no_match():
    assert get_info_by_regex("nothing here", r"(v[0-9.]+)") is None


def test_get_info_by_regex_bad_pattern():
    assert get_info_by_regex("v1.0", r"(v[0-9.]+") is None


def test_build_cli_found():
    assert build_cli("kind", "v0.20.0") == CliInfo("kind", True, "v0.20.0")


def test_build_cli_missing():
    assert build_cli("helm", None) == CliInfo("helm", False, "Not found")


def test_parse_kubectl_versions():
    output = (
        '{"clientVersion": {"gitVersion": "v1.27.3"},'
        ' "serverVersion": {"gitVersion": "v1.26.1+k3s1"}}'
    )
    assert parse_kubectl_versions(output) == ("v1.27.3", "v1.26.1+k3s1")


def test_parse_kubectl_versions_missing_server():
    output = '{"clientVersion": {"gitVersion": "v1.27.3"}}'
    assert parse_kubectl_versions(output) == ("v1.27.3", "null")


def test_parse_kubectl_versions_invalid():
    assert parse_kubectl_versions("not json") == (None, None)
    assert parse_kubectl_versions("") == (None, None)


def test_format_prefixed_version():
    assert format_prefixed_version("'24.0.2'\n") == "v24.0.2"
    assert format_prefixed_version("2.20.2") == "v2.20.2"


def test_format_prefixed_version_empty():
    assert format_prefixed_version("") is None
    assert format_prefixed_version("\n") is None