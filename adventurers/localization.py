# adventurers/localization.py

from . import config

# UI and notice translation tables
TRANSLATIONS = {
    "ko": {
        # UI Elements
        "Oxygen": "산소", "Bag": "가방", "Quest": "퀘스트", "Position": "위치",
        "Move": "이동", "Quit": "종료", "Toggle message": "메시지 토글",
        "Press any key to start.": "아무 키나 눌러 시작합니다.",

        # Notices
        "You saw a message on the sign": "표지판에 적힌 글을 읽었습니다",
        "Pick up an object": "물건을 주웠습니다",
        "You pick up '{item}'": "'{item}'을(를) 주웠습니다",
        "Your bag has": "가방 속 물건",
        "Your bag is empty.": "가방이 비어 있습니다.",
        "You died": "사망했습니다",
        "You drowned, press Enter to restart.": "물에 빠져 죽었습니다. Enter를 눌러 다시 시작하세요.",
        "No quest on this map.": "이 맵에는 퀘스트가 없습니다.",
        "Quest completed!": "퀘스트 완료!",
        "Completed": "완료",
    },
    "en": {
        "Oxygen": "Oxygen", "Bag": "Bag", "Quest": "Quest", "Position": "Position",
        "Move": "Move", "Quit": "Quit", "Toggle message": "Toggle message",
        "Press any key to start.": "Press any key to start.",

        "You saw a message on the sign": "You saw a message on the sign",
        "Pick up an object": "Pick up an object",
        "You pick up '{item}'": "You pick up '{item}'",
        "Your bag has": "Your bag has",
        "Your bag is empty.": "Your bag is empty.",
        "You died": "You died",
        "You drowned, press Enter to restart.": "You drowned, press Enter to restart.",
        "No quest on this map.": "No quest on this map.",
        "Quest completed!": "Quest completed!",
        "Completed": "Completed",
    }
}

def _(text):
    """Translate text for the configured language, or return it unchanged."""
    lang = getattr(config, 'LANGUAGE', 'en')

    trans = TRANSLATIONS.get(lang, {})
    if text in trans:
        return trans[text]

    return text
