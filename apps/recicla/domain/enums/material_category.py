"""Material Category Enum."""

from enum import Enum


class MaterialCategory(str, Enum):
    """재활용 안내 카테고리.

    값은 사용자에게 그대로 노출되는 표시 문자열입니다.
    """

    RECYCLABLE = "Reciclável"
    NON_RECYCLABLE = "Não Reciclável"
    COMPOSTABLE = "Compostável"
    REUSABLE = "Reutilização"
    HAZARDOUS_WASTE = "Resíduo Perigoso"
    ELECTRONIC_WASTE = "Resíduo Eletrônico"
    UNIDENTIFIED = "Não Identificado"
