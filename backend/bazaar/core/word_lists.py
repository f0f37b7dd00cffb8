"""Word Lists — static tables consulted by the content and gibberish checks.

Invariants:
    - All entries are lowercase (matching is case-insensitive via str.lower)
    - Tables are tuples: immutable, shared safely across requests

Design Decisions:
    - Substring matching, not token matching: catches inflected Russian/Ukrainian
      forms ("казино", "казиноо", "онлайн-казино") with one entry
    - KNOWN_ROOTS are word stems, not words, for the same reason
"""

BAD_WORDS: tuple[str, ...] = (
    # English
    "scam", "fraud", "casino", "xxx", "porn", "sex",
    # Russian / Ukrainian
    "казино", "ставки", "порно", "секс", "интим",
    "наеб", "лохотрон", "крипта", "пирамида",
)

# Stems of words that legitimately show up in marketplace titles.
# A long single word containing none of these is treated as a keyboard mash.
KNOWN_ROOTS: tuple[str, ...] = (
    # Russian / Ukrainian
    "прод", "куп", "обмен", "обмін", "отда", "відда",
    "аренд", "оренд", "сда", "здам", "квартир", "комнат", "кімнат", "будин",
    "дом", "ремонт", "услуг", "послуг", "работ", "робот", "машин", "автомоб",
    "велосипед", "самокат", "ноутбук", "компьютер", "комп'ютер", "телефон",
    "смартфон", "планшет", "наушник", "навушник", "телевизор", "телевізор",
    "холодильник", "мебел", "меблі", "диван", "кроват", "ліжк", "стол", "стул",
    "шкаф", "одежд", "одяг", "обув", "взутт", "куртк", "платт", "детск",
    "дитяч", "игруш", "іграшк", "коляск", "книг", "учебн", "перевоз",
    "доставк", "переклад", "перевод", "репетитор", "уборк", "прибиран",
    "маникюр", "манікюр", "парикмахер", "фотограф", "массаж", "масаж",
    "электр", "електр", "сантехн", "строит", "будівел", "кухон", "посуд",
    "техник", "технік", "аксессуар", "аксесуар", "косметик", "парфюм",
    "спорт", "тренаж", "инструмент", "інструмент", "запчаст", "шины", "шини",
    # English
    "sell", "sale", "buy", "rent", "apartment", "room", "house", "service",
    "repair", "phone", "iphone", "samsung", "xiaomi", "laptop", "macbook",
    "computer", "tablet", "ipad", "headphone", "airpods", "playstation",
    "xbox", "nintendo", "bike", "bicycle", "scooter", "car", "furniture",
    "sofa", "table", "chair", "wardrobe", "clothes", "jacket", "dress",
    "shoes", "sneakers", "kids", "stroller", "toy", "book", "delivery",
    "moving", "cleaning", "translation", "tutor", "lesson", "manicure",
    "haircut", "photo", "massage", "kitchen", "camera", "watch", "monitor",
    "keyboard", "printer", "speaker", "charger", "cable",
)
