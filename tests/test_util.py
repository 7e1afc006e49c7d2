import pytest

from pvekit.util import (
    add_to_list,
    csv_to_list,
    disk_size_gb,
    item_in_key_of_array,
    itob,
    list_to_csv,
    parse_conf,
    parse_pm_conf,
    parse_sub_conf,
)


def test_itob():
    assert itob(1) is True
    assert itob(0) is False
    assert itob(2) is False


def test_item_in_key_plain_match():
    users = [{"userid": "user1@pve"}, {"userid": "user2@pve"}]
    assert item_in_key_of_array(users, "userid", "user2@pve") is True
    assert item_in_key_of_array(users, "userid", "user3@pve") is False


def test_item_in_key_token_match():
    users = [{"userid": "root@pam", "tokens": [{"tokenid": "abc"}]}]
    assert item_in_key_of_array(users, "userid", "root@pam!abc") is True
    assert item_in_key_of_array(users, "userid", "root@pam!xyz") is False


def test_item_in_key_tokens_none():
    users = [{"userid": "root@pam", "tokens": None}]
    assert item_in_key_of_array(users, "userid", "root@pam!abc") is False


def test_parse_sub_conf_types():
    assert parse_sub_conf("size=10", "=") == ("size", 10)
    assert parse_sub_conf("ssd=true", "=") == ("ssd", True)
    assert parse_sub_conf("ssd=false", "=") == ("ssd", False)
    assert parse_sub_conf("file=local:iso", "=") == ("file", "local:iso")


def test_parse_sub_conf_without_separator():
    assert parse_sub_conf("novalue", "=") == ("", None)


def test_parse_sub_conf_huge_number_stays_string():
    big = "9" * 30
    assert parse_sub_conf(f"n={big}", "=") == ("n", big)


def test_parse_pm_conf_implicit_key():
    conf = parse_pm_conf("virtio,bridge=vmbr0,firewall=1", "model")
    assert conf["model"] == "virtio"
    assert conf["bridge"] == "vmbr0"
    assert conf["firewall"] == 1


def test_parse_pm_conf_first_has_key():
    conf = parse_pm_conf("model=e1000,bridge=vmbr0", "model")
    assert conf == {"model": "e1000", "bridge": "vmbr0"}


def test_parse_conf_custom_separators():
    conf = parse_conf("a:1;b:x", ";", ":", "")
    assert conf == {"a": 1, "b": "x"}


def test_disk_size_units_agree():
    assert disk_size_gb("2T") == disk_size_gb("2048G")
    assert disk_size_gb("1024M") == disk_size_gb("1G")
    assert disk_size_gb("1048576k") == disk_size_gb("1gb")


def test_disk_size_number_and_other():
    assert disk_size_gb(3.5) == 3.5
    assert disk_size_gb(None) == 0.0


def test_disk_size_invalid_string():
    with pytest.raises(ValueError):
        disk_size_gb("abc")


def test_add_to_list():
    assert add_to_list("", "a") == "a"
    assert add_to_list("a", "b") == "a,b"


def test_csv_round_trip():
    items = ["x", "y", "z"]
    assert csv_to_list(list_to_csv(items)) == items
    assert csv_to_list("") == [""]


def test_list_to_csv_other_type():
    assert list_to_csv("abc") == ""


def test_list_to_csv_non_string_item():
    with pytest.raises(TypeError):
        list_to_csv(["a", 1])