import pytest

from fujihack.models import TEMPLATE, get_model, list_models, stub_assembly


def test_model_name_and_code():
    model = get_model("xa2_130")
    assert model.model_name == "Fujifilm X-A2"
    assert model.model_code == "00050701000507020005070400050709"
    assert model.code_arm is True


def test_lookup_is_case_insensitive():
    assert get_model("XF1_101") == get_model("xf1_101")


def test_unknown_model_raises():
    with pytest.raises(KeyError):
        get_model("nonexistent_000")


def test_list_models_sorted_and_complete():
    names = list_models()
    assert names == sorted(names)
    assert {"xa2_130", "xf1_101", "z3_102", "hs20exr_104"} <= set(names)
    assert "template" not in names


def test_every_listed_model_resolves():
    for name in list_models():
        assert get_model(name).key == name


def test_stub_address():
    assert get_model("xa2_130").stub_address("fuji_fopen") == 0x006F0E48
    assert get_model("xf1_101").stub_address("fuji_beep") == 0x00E14D18


def test_missing_stub_raises():
    with pytest.raises(KeyError):
        get_model("xt2_440").stub_address("fuji_fopen")


def test_screen_layer_base():
    model = get_model("xf1_101")
    assert model.screen_layer(0) == 0x01CEBE00


def test_screen_layer_stride_is_one_rgba_frame():
    model = get_model("xf1_101")
    stride = model.screen_width * model.screen_height * 4
    assert model.screen_layer(3) - model.screen_layer(2) == stride


def test_screen_layer_without_buffer_raises():
    with pytest.raises(ValueError):
        get_model("xa2_130").screen_layer(0)


def test_screen_layer_negative_index_raises():
    with pytest.raises(ValueError):
        get_model("xf1_101").screen_layer(-1)


def test_constants_follow_source_expressions():
    z3 = get_model("z3_102")
    assert z3.constants["MEM_START"] == 0x0030D4F4 - 10000
    assert z3.constants["COPY_LENGTH"] == 10000 + 6052
    hs20 = get_model("hs20exr_104")
    assert hs20.constants["COPY_LENGTH"] == (
        hs20.constants["MEM_START"] - hs20.constants["TEXT_START"]
    )


def test_features():
    assert "MEMO_HACK_WORKS" in get_model("xf1_101").features
    assert get_model("xa1_150").features == frozenset()


def test_template_stub():
    assert TEMPLATE.stub_address("FUN_0x1234567") == 0x123456


def test_stub_assembly_plain_symbol():
    text = stub_assembly("fuji_fopen", 0x006F0E48, pic=False)
    lines = text.splitlines()
    assert lines[0] == ".global fuji_fopen"
    assert lines[1] == ".extern fuji_fopen"
    assert lines[-1] == "fuji_fopen = (0x006f0e48)"


def test_stub_assembly_trampoline():
    text = stub_assembly("fuji_fopen", 0x006F0E48, pic=True)
    assert "fuji_fopen:" in text.splitlines()
    assert "adr r9, fuji_fopen_addr" in text
    assert "ldr r9, [r9]" in text
    assert "bx r9" in text
    assert "fuji_fopen_addr: .int (0x006f0e48)" in text
    assert text.rstrip().endswith(".endfunc")


def test_stub_assembly_rejects_bad_input():
    with pytest.raises(ValueError):
        stub_assembly("not a name", 0x10, pic=False)
    with pytest.raises(ValueError):
        stub_assembly("name", -1, pic=True)