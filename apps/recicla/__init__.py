"""ReciclaApp - 재활용 소재 인식 및 배출 장소 안내 서비스."""
