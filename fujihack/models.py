"""Per-camera firmware facts: names, model codes, memory addresses and stubs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class CameraModel:
    """Everything known about one camera model and firmware revision."""

    key: str
    model_name: str
    model_code: str | None = None
    firmware_file: str | None = None
    code_arm: bool = False
    screen_width: int | None = None
    screen_height: int | None = None
    s3_file: str | None = None
    constants: Mapping[str, int] = field(default_factory=dict)
    stubs: Mapping[str, int] = field(default_factory=dict)
    features: frozenset[str] = frozenset()

    def screen_layer(self, index: int) -> int:
        """Return the address of screen layer ``index`` in the screen buffer."""
        base = self.constants.get("MEM_SCREEN_BUFFER")
        if base is None or self.screen_width is None or self.screen_height is None:
            raise ValueError(f"{self.model_name} has no known screen buffer")
        if index < 0:
            raise ValueError(f"layer index must not be negative: {index}")
        return base + (self.screen_width * self.screen_height * 4) * index

    def stub_address(self, name: str) -> int:
        """Return the firmware address of the stub ``name``."""
        try:
            return self.stubs[name]
        except KeyError:
            raise KeyError(f"{self.model_name} has no stub named {name!r}") from None


def stub_assembly(name: str, address: int, pic: bool) -> str:
    """Return assembler text that defines ``name`` at ``address``.

    With ``pic`` the symbol is a small trampoline that loads the address and
    jumps to it; otherwise it is a plain absolute symbol.
    """
    if not name.isidentifier():
        raise ValueError(f"not a valid symbol name: {name!r}")
    if not 0 <= address <= 0xFFFFFFFF:
        raise ValueError(f"not a 32-bit address: {address:#x}")
    target = f"({address:#010x})"
    lines = [f".global {name}", f".extern {name}"]
    if pic:
        lines += [
            ".func",
            f"{name}:",
            f"\tadr r9, {name}_addr",
            "\tldr r9, [r9]",
            "\tbx r9",
            f"\t{name}_addr: .int {target}",
            ".endfunc",
        ]
    else:
        lines.append(f"{name} = {target}")
    return "\n".join(lines) + "\n"


TEMPLATE = CameraModel(
    key="template",
    model_name="Fujifilm XXXXX",
    model_code="Paste_model_code_from_patcher",
    code_arm=True,
    stubs={"FUN_0x1234567": 0x123456},
)
"""Starting point for describing a new model."""


_HS20EXR_MEM_START = 0x00DB6568 - 10000
_HS20EXR_TEXT_START = 0x0074E5B0 - 10000

_XT10_OUT_OF_MEMORY_REF = 0x1F54C3C
_XT10_OUT_OF_MEMORY_REAL = 0x00BF4C84

_MODELS: tuple[CameraModel, ...] = (
    CameraModel(
        key="hs20exr_104",
        model_name="Fujifilm HS20EXR",
        model_code="62306231623262336234623562366237623862397382",
        features=frozenset({"CAN_CUSTOM_FIRMWARE", "PRINTIM_HACK_WORKS"}),
        constants={
            "MEM_STRNCPY": 0x001E1AF8,
            "MEM_SUBTRING": 0x001E1AF8,
            "MEM_STRNCMP": 0x001E1E38,
            "FIRM_PRINTIM": 0x0040674C,
            "MEM_START": _HS20EXR_MEM_START,
            "TEXT_START": _HS20EXR_TEXT_START,
            "MEM_EEP_START": 0x4138A1C0,
            "COPY_LENGTH": _HS20EXR_MEM_START - _HS20EXR_TEXT_START,
        },
    ),
    CameraModel(
        key="xa1_150",
        model_name="Fujifilm X-A1",
        model_code="00030011000300120003001400030019",
    ),
    CameraModel(
        key="xa2_130",
        model_name="Fujifilm X-A2",
        model_code="00050701000507020005070400050709",
        firmware_file="FWUP0006.DAT",
        s3_file="C:\\IMFIDX10\\LX30B.S3",
        code_arm=True,
        screen_width=720,
        screen_height=480,
        constants={
            "FIRM_IMG_PROPS": 0x00598AEC,
            "FIRM_IMG_PROPS_MAX": 2000,
            "FIRM_RST_WRITE": 0x005B0388,
            "FIRM_RST_CONFIG1": 0x00592BD4,
            "FIRM_RST_CONFIG2": 0x005B81E0,
            "FIRM_INSTAX_MENU": 0x0059F604,
            "FIRM_INSTAX_MENU_MAX": 400,
            "MEM_INSTAX_MENU": 0x010FF5BC,
            "FIRM_USB_SCREEN": 0x005AE41C,
            "MEM_PTP_TEXT": 0x00D6BFD0,
            "MEM_PTP_9805": 0x00D60870,
            "MEM_PTP_RETURN": 0x00D5EAAC,
            "MEM_OPENGL_BUFFERS": 0x007FD324,
            "MEM_INPUT_MAP": 0x00931C80,
            "MEM_UNUSED_SPACE": 0x0142A640,
            "MEM_EEP_START": 0x41ACD800,
            "MEM_RUN_DEV_MODE": 0x00D35774,
            "MEM_MS_TIMER": 0x00917CE0,
            "MEM_TEXT_LAYERS": 0x16FACB4,
            "MEM_GET_REC_LIMIT": 0x010E5D2C,
            "MEM_SEARCHTBL_CALL_HIJACK": 0x012598A4,
            "MEM_SEARCHTBL_TASK": 0x01259874,
            "MEM_RTOS_FUNCTIONS": 0x0004DAE0,
            "SQLITE_MEM_METHODS": 0x01427BF8,
        },
        stubs={
            "fuji_drive": 0x006F3F08,
            "fuji_fopen": 0x006F0E48,
            "fuji_fread": 0x006F0EFC,
            "fuji_fclose": 0x006F0FBC,
            "fuji_fwrite": 0x006F0F5C,
            "fuji_get_error": 0x006F8BA8,
            "fuji_fseek": 0x006F10D8,
            "fuji_file_wait": 0x00EA95E4,
            "fuji_file_reset": 0x00EA966C,
            "fuji_fstats": 0x006F1684,
            "fuji_wait_task_start": 0x00670134,
            "fuji_wait_task_stop": 0x0067032C,
            "fuji_task_sleep": 0x006F84E8,
            "fuji_task_event": 0x006F983C,
            "fuji_io_lock": 0x00649EB4,
            "fuji_screen_write": 0x010F0904,
            "fuji_discard_text_buffer": 0x010F0A70,
            "fuji_rst_write": 0x01110340,
            "fuji_rst_config1": 0x010F2B8C,
            "fuji_rst_config2": 0x01118198,
            "sqlite_snprintf": 0x013EE680,
            "fuji_init_sqlite": 0x01258E80,
            "sqlite_exec": 0x0141611C,
            "sqlite_mallocAlarm": 0x013ED0F0,
            "fuji_press_key": 0x00EA93F8,
            "fuji_press_key_alias": 0x00EA98C4,
            "fuji_get_task_id": 0x006F84B8,
        },
    ),
    CameraModel(
        key="xf1_101",
        model_name="Fujifilm XF-1",
        model_code=(
            "000192710001927200019273000192740001927500019276"
            "000192770001927800019279000192810001928200019286"
        ),
        firmware_file="FPUPDATE.DAT",
        code_arm=True,
        screen_width=640,
        screen_height=480,
        features=frozenset(
            {
                "CAN_DO_EXECUTER",
                "CAN_CUSTOM_FIRMWARE",
                "PRINTIM_HACK_WORKS",
                "MEMO_HACK_WORKS",
                "IMG_PROPS_HACK_WORKS",
            }
        ),
        constants={
            "FIRM_IMG_PROPS": 0x00485258,
            "FIRM_IMG_PROPS_MAX": 4000,
            "FIRM_RST_WRITE": 0x0049AAA4,
            "FIRM_RST_CONFIG1": 0x0047A74C,
            "FIRM_RST_CONFIG2": 0x004A3B80,
            "FIRM_PRINTIM": 0x00516C90,
            "FIRM_PRINTIM_MAX": 236,
            "FIRM_MEMO": 0x0063FE20,
            "FIRM_MEMO_MAX": 100,
            "MEM_PTP_9805": 0x00E52C00,
            "MEM_PTP_RETURN": 0x00E507C0,
            "MEM_PTP_TEXT": 0x00E5E228,
            "MEM_CRYPT_START": 0x96B10C0,
            "FIRM_CRYPT_START": 0x001C8048,
            "MEM_FIRM_START": 0xDA30E5,
            "MEM_EEP_START": 0x409A7E00,
            "MEM_SCREEN_BUFFER": 0x01CEBE00,
            "MEM_DEV_FLAG": 0x007A117C,
            "MEM_DEV_MODE": 0x007A7250,
            "FUJI_FOPEN_HANDLER": 0x00FD45B4,
            "FUJI_FWRITE_HANDLER": 0x00FD462C,
            "FUJI_FREAD_HANDLER": 0x00E8E754,
            "FUJI_FCLOSE_HANDLER": 0x00FD45DC,
            "MEM_INPUT_MAP": 0x00795370,
            "MEM_MS_TIMER": 0x007B3588,
            "MEM_SQLITE_STRUCT": 0x0144C670,
            "MEM_LAYER_INFO": 0x0152E0F4,
        },
        stubs={
            "fuji_drive": 0x0072DB0C,
            "fuji_fopen": 0x0072B87C,
            "fuji_fread": 0x0072B618,
            "fuji_fwrite": 0x0072B428,
            "fuji_fclose": 0x0072B250,
            "fuji_fseek": 0x0072B08C,
            "fuji_file_wait": 0x00FD5A1C,
            "fuji_file_reset": 0x00FD4590,
            "fuji_init_sqlite": 0x013C24A8,
            "sqlite_exec": 0x014224B4,
            "sqlite_snprintf": 0x013FF32C,
            "sqlite_mallocAlarm": 0x013FDDCC,
            "fuji_screen_write": 0x011D1FB4,
            "fuji_discard_text_buffer": 0x011D1F90,
            "fuji_update_buffer": 0x00E8D418,
            "fuji_rst_config1": 0x011D2704,
            "fuji_rst_config2": 0x011FBB38,
            "fuji_rst_rect": 0x0122C35C,
            "fuji_rst_bmp": 0x0122EA68,
            "fuji_rst_write": 0x011F2A5C,
            "fuji_task_sleep": 0x00735864,
            "fuji_create_semaphore": 0x0073B3A4,
            "fuji_release_semaphore": 0x00734848,
            "fuji_get_semaphore": 0x00734938,
            "fuji_wait_task_start": 0x00626044,
            "fuji_wait_task_stop": 0x00625F34,
            "fuji_task_suspend": 0x00734038,
            "fuji_task_create": 0x00735C2C,
            "fuji_task_check": 0x00734610,
            "fuji_task_test": 0x00734848,
            "fuji_apply_eeprom": 0x00633D1C,
            "fuji_dir_open": 0x0070AE18,
            "fuji_dir_next": 0x0070ACD8,
            "sensor_info": 0x00FEE158,
            "key_push": 0x011D2650,
            "run_auto_act": 0x00FD5AA4,
            "fuji_ptp_return": 0x00E507C0,
            "fuji_ptp_finish": 0x00E514F4,
            "fuji_show_gui": 0x00E13030,
            "fuji_beep": 0x00E14D18,
            "render_eep_menu": 0x00E2E720,
            "run_s3_file": 0x00FD2480,
            "fuji_get_task": 0x007332CC,
            "flashloader_id": 0x0073935C,
            "flashloader_0": 0x0064057C,
            "flashloader_1": 0x0063E388,
        },
    ),
    CameraModel(
        key="xpro1_382",
        model_name="Fujifilm X-Pro1",
        model_code=(
            "000102410001024200010244000102450001024600010247"
            "000102480001024900010255"
        ),
        firmware_file="FPUPDATE.DAT",
    ),
    CameraModel(
        key="xt10_131",
        model_name="Fujifilm X-T10",
        model_code="0005100100051002000510040005100500051007000510090005101",
        constants={
            "OUT_OF_MEMORY_CODE": 0x00BD8954,
            "OUT_OF_MEMORY_REF": _XT10_OUT_OF_MEMORY_REF,
            "OUT_OF_MEMORY_REAL": _XT10_OUT_OF_MEMORY_REAL,
            "MEM_START": _XT10_OUT_OF_MEMORY_REF - 10000,
            "TEXT_START": _XT10_OUT_OF_MEMORY_REAL - 10000,
            "COPY_LENGTH": 10000 + 6052,
            "MEM_START2": 0x01B59BD4 - 4960,
            "TEXT_START2": 0x007F9C1C - 4960,
            "COPY_LENGTH2": 79024 + 4960,
            "MEM_START3": 0x01CD6DE8 - 431,
            "TEXT_START3": 0x00976E30 - 431,
            "COPY_LENGTH3": 0x281A30,
        },
    ),
    CameraModel(
        key="xt20_210",
        model_name="Fujifilm X-T20",
        model_code="00053661000536620005366400053665000536670005367000053669",
        firmware_file="FWUP0013.DAT",
    ),
    CameraModel(
        key="xt2_440",
        model_name="Fujifilm X-T2",
        model_code="00053101000531020005310400053105000531070005311000053109",
    ),
    CameraModel(
        key="xt4_150",
        model_name="Fujifilm X-T4",
    ),
    CameraModel(
        key="z3_102",
        model_name="Fujifilm Z3",
        model_code="1109111011121113111411151116",
        constants={
            "MODEL_SIZE": 128,
            "MEM_START": 0x0030D4F4 - 10000,
            "TEXT_START": 0x00307524 - 10000,
            "COPY_LENGTH": 10000 + 6052,
        },
    ),
)

_REGISTRY: dict[str, CameraModel] = {model.key: model for model in _MODELS}


def get_model(name: str) -> CameraModel:
    """Return the model registered under ``name`` (for example ``"xf1_101"``)."""
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise KeyError(f"unknown camera model: {name!r}") from None


def list_models() -> list[str]:
    """Return the keys of every known model, sorted."""
    return sorted(_REGISTRY)