"""English names for the routes offered by the site."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_ROUTE_NAMES: dict[str, str] = {
    # Area 1
    "新宿～富士五湖線": "Shinjuku - Fuji Five Lakes",
    "新宿～甲府線": "Shinjuku - Kofu",
    "新宿～身延・南アルプス市八田線": "Shinjuku - Minobu/South Alps Hatta",
    "新宿～さがみ湖イルミリオン線": "Shinjuku - Sagamiko Illumillion",
    "新宿～諏訪・岡谷・茅野線": "Shinjuku - Suwa/Okaya/Chino",
    "新宿～伊那・飯田線": "Shinjuku - Ina/Iida",
    "新宿～松本線": "Shinjuku - Matsumoto",
    "新宿・池袋～長野線": "Shinjuku/Ikebukuro - Nagano",
    "新宿～白馬線": "Shinjuku - Hakuba",
    "新宿～塩尻・木曽福島線": "Shinjuku - Shiojiri/Kiso-Fukushima",
    "成田空港～軽井沢線": "Narita Airport - Karuizawa",
    "新宿～上高地線（さわやか信州号）": "Shinjuku - Kamikochi (Sawayaka Shinshu)",
    "新宿～飛騨高山線": "Shinjuku - Hida Takayama",
    "新宿～名古屋線": "Shinjuku - Nagoya",
    "岐阜～新宿線": "Gifu - Shinjuku",
    "新宿・渋谷～三島・沼津線": "Shinjuku/Shibuya - Mishima/Numazu",
    "新宿・渋谷～清水・静岡線": "Shinjuku/Shibuya - Shimizu/Shizuoka",
    "新宿・渋谷～浜松線": "Shinjuku/Shibuya - Hamamatsu",
    "新宿～サマーランド線": "Shinjuku - Summerland",
    "新宿・渋谷～仙台・石巻線": "Shinjuku/Shibuya - Sendai/Ishinomaki",
    "東京・新宿～青森線（ノクターン・ネオ号）": "Tokyo/Shinjuku - Aomori (Nocturne Neo)",
    "新宿・大宮～八戸・三沢・むつ線（しもきた号）": (
        "Shinjuku/Omiya - Hachinohe/Misawa/Mutsu (Shimokita)"
    ),
    "新宿・渋谷～大阪（阪急梅田）・ＵＳＪ線": (
        "Shinjuku/Shibuya - Osaka (Hankyu Umeda)/USJ"
    ),
    "船橋・新宿・東京～京都・大阪線（アウルライナー）": (
        "Funabashi/Shinjuku/Tokyo - Kyoto/Osaka (Owl Liner)"
    ),
    "新宿～大阪線　ツインクル": "Shinjuku - Osaka (Twinkle)",
    "新宿～大阪線　カジュアル": "Shinjuku - Osaka (Casual)",
    "新宿・渋谷～神戸姫路線": "Shinjuku/Shibuya - Kobe/Himeji",
    "東京・新宿・横浜～高松・丸亀線": "Tokyo/Shinjuku/Yokohama - Takamatsu/Marugame",
    "東京・新宿～徳島・阿南線（マイ・エクスプレス号）": (
        "Tokyo/Shinjuku - Tokushima/Anan (My Express)"
    ),
    "新宿・横浜～松山線": "Shinjuku/Yokohama - Matsuyama",
    # Area 2
    "名古屋～福岡線": "Nagoya - Fukuoka",
    "名古屋～岡山線": "Nagoya - Okayama",
    "名古屋～仙台線": "Nagoya - Sendai",
    "名古屋～宇都宮・郡山線": "Nagoya - Utsunomiya/Koriyama",
    "竜王・甲府～名古屋線": "Ryuo/Kofu - Nagoya",
    "名古屋～富士五湖線": "Nagoya - Fuji Five Lakes",
    "名古屋～上高地線": "Nagoya - Kamikochi",
    "名古屋～高山線": "Nagoya - Takayama",
    "名古屋～白川郷・金沢線": "Nagoya - Shirakawa-go/Kanazawa",
    "名古屋～金沢線": "Nagoya - Kanazawa",
    "名古屋～郡上ひるがの線": "Nagoya - Gujo Hirugano",
    "名古屋～富山線": "Nagoya - Toyama",
    "名古屋～高岡・砺波線": "Nagoya - Takaoka/Tonami",
    "名古屋～福井線": "Nagoya - Fukui",
    "名古屋～松本線": "Nagoya - Matsumoto",
    "名古屋～伊那・箕輪線": "Nagoya - Ina/Minowa",
    "名古屋～飯田線": "Nagoya - Iida",
    "名古屋～馬籠・妻籠線": "Nagoya - Magome/Tsumago",
    # Area 3
    "羽田～調布・若葉台・国分寺・武蔵小金井線": (
        "Haneda - Chofu/Wakabadai/Kokubunji/Musashi-Koganei"
    ),
    "羽田多摩センター線": "Haneda - Tama Center",
    "羽田八王子線": "Haneda - Hachioji",
    "羽田～河辺・羽村・福生・秋川線": "Haneda - Kawabe/Hamura/Fussa/Akigawa",
    "羽田・東京（八重洲）～草津線（温泉アクセスライナー草津）": (
        "Haneda/Tokyo (Yaesu) - Kusatsu (Onsen Access Liner)"
    ),
}

ROUTE_NAMES: Mapping[str, str] = MappingProxyType(_ROUTE_NAMES)
"""Read-only map from Japanese route names to English ones."""


def translate_route_name(japanese: str) -> str:
    """English name of a route, or the name unchanged when it is unknown."""
    return ROUTE_NAMES.get(japanese, japanese)