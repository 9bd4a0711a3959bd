"""이벤트 유형 상수

페이로드는 식별자(번호, 이름, instance_id)만 담는다.
"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # catalog
    POKEMON_REGISTERED = "pokemon_registered"
    MOVE_REGISTERED = "move_registered"
    ITEM_REGISTERED = "item_registered"
    TRAINER_REGISTERED = "trainer_registered"
    TRAINER_REMOVED = "trainer_removed"

    # === Roster events ===
    POKEMON_ADDED = "pokemon_added"
    POKEMON_RELEASED = "pokemon_released"
    POKEMON_SWITCHED = "pokemon_switched"

    # === Move events ===
    MOVE_LEARNED = "move_learned"
    MOVE_FORGOTTEN = "move_forgotten"

    # === Inventory events ===
    ITEM_ADDED = "item_added"
    ITEM_BOUGHT = "item_bought"
    ITEM_SOLD = "item_sold"
    ITEM_USED = "item_used"
    HELD_ITEM_DISCARDED = "held_item_discarded"

    # === Growth events ===
    POKEMON_LEVELED_UP = "pokemon_leveled_up"
    POKEMON_EVOLVED = "pokemon_evolved"
