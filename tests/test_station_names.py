import pytest

from busscraper.station_names import STATION_NAMES, translate_station_name


def test_translate_known_station_shinjuku():
    result = translate_station_name("バスタ新宿（南口）")
    assert result == "Shinjuku Expressway Bus Terminal (South Exit)"


def test_translate_known_station_kawaguchiko():
    result = translate_station_name("河口湖駅")
    assert result == "Kawaguchiko Station"


def test_translate_known_station_fuji_highland():
    result = translate_station_name("富士急ハイランド")
    assert result == "Fuji-Q Highland"


def test_translate_known_station_haneda():
    result = translate_station_name("羽田空港第１ターミナル")
    assert result == "Haneda Airport Terminal 1"


def test_translate_unknown_station_returns_original():
    assert translate_station_name("未知の駅") == "未知の駅"


def test_translate_empty_string():
    assert translate_station_name("") == ""


def test_translate_english_name_is_returned_unchanged():
    assert translate_station_name("Kawaguchiko Station") == "Kawaguchiko Station"


@pytest.mark.parametrize(
    "japanese",
    ["バスタ新宿（南口）", "河口湖駅", "名鉄バスセンター", "金沢駅", "羽田空港第１ターミナル", "草津温泉バスターミナル"],
)
def test_sample_stations_are_known(japanese):
    assert japanese in STATION_NAMES
    assert translate_station_name(japanese) == STATION_NAMES[japanese]


def test_at_least_200_stations_translate():
    translated = [jp for jp in STATION_NAMES if translate_station_name(jp) != jp]
    assert len(translated) >= 200


def test_every_known_station_translates_to_non_empty_name():
    for japanese, english in STATION_NAMES.items():
        assert japanese
        assert english
        assert translate_station_name(japanese) == english


def test_station_map_cannot_be_extended():
    with pytest.raises(TypeError):
        STATION_NAMES["新しい駅"] = "New Station"  # type: ignore[index]
    assert translate_station_name("新しい駅") == "新しい駅"