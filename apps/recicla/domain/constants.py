"""Recycling knowledge base constants.

분류 라벨 → 배출 안내 정적 테이블. 라벨은 정확히 일치할 때만 조회됩니다.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from recicla.domain.enums import MaterialCategory
from recicla.domain.value_objects import RecyclingGuidance

DEFAULT_LABEL = "Defaut"

UNIDENTIFIED_GUIDANCE = RecyclingGuidance(
    is_recyclable=False,
    material="Material não identificado",
    category=MaterialCategory.UNIDENTIFIED,
    disposal_info=(
        "Não foi possível identificar o material com confiança suficiente. "
        "O objeto pode não estar no banco de dados do modelo. Tente capturar uma imagem "
        "mais clara, com melhor iluminação, ou consulte informações locais sobre reciclagem."
    ),
)

# 실시간 모델 라벨 (학습 데이터 라벨 그대로, "Vidro "의 공백 포함)
LIVE_MODEL_GUIDANCE: Mapping[str, RecyclingGuidance] = MappingProxyType(
    {
        "Garrafa pet": RecyclingGuidance(
            is_recyclable=True,
            material="Garrafa PET",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Lave e seque antes de descartar. Remova o rótulo se possível. "
                "Pode ser reciclado em pontos de coleta seletiva."
            ),
        ),
        "Pneu/borracha": RecyclingGuidance(
            is_recyclable=True,
            material="Pneu/Borracha",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Pneus devem ser descartados em pontos específicos de coleta. Não descarte no "
                "lixo comum. Procure borracharias ou pontos de coleta de pneus."
            ),
        ),
        "Vidro ": RecyclingGuidance(
            is_recyclable=True,
            material="Vidro",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Lave e remova tampas. Vidro é 100% reciclável e pode ser reutilizado "
                "infinitamente. Cuidado com cacos."
            ),
        ),
        "Papelão": RecyclingGuidance(
            is_recyclable=True,
            material="Papelão",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Desmonte caixas de papelão e mantenha seco. "
                "Pode ser reciclado mesmo com fitas adesivas."
            ),
        ),
        "Esponja": RecyclingGuidance(
            is_recyclable=False,
            material="Esponja",
            category=MaterialCategory.NON_RECYCLABLE,
            disposal_info=(
                "Esponjas não são recicláveis. Descarte no lixo comum. "
                "Considere usar esponjas reutilizáveis ou biodegradáveis."
            ),
        ),
        "Pilha/bateria": RecyclingGuidance(
            is_recyclable=False,
            material="Pilhas/Baterias",
            category=MaterialCategory.HAZARDOUS_WASTE,
            disposal_info=(
                "Nunca descarte no lixo comum. Procure pontos de coleta de pilhas e baterias. "
                "Estes materiais contêm substâncias tóxicas."
            ),
        ),
        "Palha de aço": RecyclingGuidance(
            is_recyclable=False,
            material="Palha de Aço",
            category=MaterialCategory.NON_RECYCLABLE,
            disposal_info=(
                "Palha de aço não é reciclável. Descarte no lixo comum. "
                "Considere alternativas reutilizáveis."
            ),
        ),
    }
)

# 레거시 객체 탐지기 라벨 (analyze 엔드포인트)
LEGACY_DETECTOR_GUIDANCE: Mapping[str, RecyclingGuidance] = MappingProxyType(
    {
        "plastic bottle": RecyclingGuidance(
            is_recyclable=True,
            material="Garrafa PET",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Lave e seque antes de descartar. Remova o rótulo se possível. "
                "Pode ser reciclado em pontos de coleta seletiva."
            ),
            recycling_code="PET",
        ),
        "plastic container": RecyclingGuidance(
            is_recyclable=True,
            material="Embalagem Plástica",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Lave e seque antes de descartar. "
                "Verifique o código de reciclagem (1-7) na embalagem."
            ),
            recycling_code="VAR",
        ),
        "plastic bag": RecyclingGuidance(
            is_recyclable=False,
            material="Saco Plástico",
            category=MaterialCategory.NON_RECYCLABLE,
            disposal_info=(
                "Sacos plásticos finos não são reciclados na coleta seletiva comum. "
                "Procure pontos específicos para sacolas plásticas."
            ),
        ),
        "cardboard": RecyclingGuidance(
            is_recyclable=True,
            material="Papelão",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Desmonte caixas de papelão e mantenha seco. "
                "Pode ser reciclado mesmo com fitas adesivas."
            ),
        ),
        "paper": RecyclingGuidance(
            is_recyclable=True,
            material="Papel",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Separe de outros materiais. Papel limpo e seco pode ser reciclado. "
                "Evite papel engordurado ou com cola."
            ),
        ),
        "newspaper": RecyclingGuidance(
            is_recyclable=True,
            material="Jornal",
            category=MaterialCategory.RECYCLABLE,
            disposal_info="Mantenha seco e limpo. Jornais são facilmente recicláveis.",
        ),
        "glass bottle": RecyclingGuidance(
            is_recyclable=True,
            material="Garrafa de Vidro",
            category=MaterialCategory.RECYCLABLE,
            disposal_info=(
                "Lave e remova tampas. Vidro é 100% reciclável e pode ser "
                "reutilizado infinitamente."
            ),
        ),
        "glass jar": RecyclingGuidance(
            is_recyclable=True,
            material="Pote de Vidro",
            category=MaterialCategory.RECYCLABLE,
            disposal_info="Lave e remova tampas. Vidro é 100% reciclável.",
        ),
        "aluminum can": RecyclingGuidance(
            is_recyclable=True,
            material="Lata de Alumínio",
            category=MaterialCategory.RECYCLABLE,
            disposal_info="Lave e amasse para economizar espaço. Alumínio é 100% reciclável.",
        ),
        "tin can": RecyclingGuidance(
            is_recyclable=True,
            material="Lata de Estanho",
            category=MaterialCategory.RECYCLABLE,
            disposal_info="Lave bem antes de descartar. Pode conter resíduos de alimentos.",
        ),
        "food waste": RecyclingGuidance(
            is_recyclable=False,
            material="Resíduo Orgânico",
            category=MaterialCategory.COMPOSTABLE,
            disposal_info=(
                "Pode ser compostado ou descartado no lixo orgânico. "
                "Evite desperdício alimentar."
            ),
        ),
        "banana peel": RecyclingGuidance(
            is_recyclable=False,
            material="Casca de Banana",
            category=MaterialCategory.COMPOSTABLE,
            disposal_info="Excelente para compostagem. Rico em nutrientes para o solo.",
        ),
        "electronic device": RecyclingGuidance(
            is_recyclable=False,
            material="Dispositivo Eletrônico",
            category=MaterialCategory.ELECTRONIC_WASTE,
            disposal_info=(
                "Não descarte no lixo comum. Procure pontos de coleta de lixo eletrônico "
                "ou devolva ao fabricante."
            ),
        ),
        "battery": RecyclingGuidance(
            is_recyclable=False,
            material="Bateria",
            category=MaterialCategory.HAZARDOUS_WASTE,
            disposal_info=(
                "Nunca descarte no lixo comum. Procure pontos de coleta de pilhas e baterias."
            ),
        ),
        "clothing": RecyclingGuidance(
            is_recyclable=False,
            material="Roupa",
            category=MaterialCategory.REUSABLE,
            disposal_info=(
                "Considere doar para instituições de caridade ou pontos de coleta "
                "de roupas usadas."
            ),
        ),
        "fabric": RecyclingGuidance(
            is_recyclable=False,
            material="Tecido",
            category=MaterialCategory.REUSABLE,
            disposal_info=(
                "Pode ser reutilizado ou doado. "
                "Alguns tecidos são recicláveis em pontos específicos."
            ),
        ),
    }
)
