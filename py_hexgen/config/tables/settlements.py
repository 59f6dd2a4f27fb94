"""Per-subtype settlement tables, keyed by subtype then by table name."""

from typing import Dict

from ...core.tables import RollableTable, numbered_entries, ranged_entries
from .features import DISPOSITION


def _table(subtype: str, name: str, formula: str, entries) -> RollableTable:
    return RollableTable(
        id=f"{subtype}-{name.replace('_', '-')}",
        name=f"{subtype.capitalize()} {name.replace('_', ' ').title()}",
        category="settlements",
        dice_formula=formula,
        entries=entries,
    )


def _simple(subtype: str, name: str, values) -> RollableTable:
    return _table(subtype, name, f"1d{len(values)}", numbered_entries(values))


_SIZE = ranged_entries((1, 2, "small"), (3, 5, "medium"), (6, 6, "big"))

HAMLET_TABLES = {
    "building": _simple("hamlet", "building", [
        "Brewery/Vineyard", "Chapel", "Farm/Ranch", "Manor", "Mill", "Mine",
        "Sawmill", "Shop", "Tavern", "Toll", "Tourney grounds", "Watchtower",
    ]),
    "layout": _simple("hamlet", "layout", [
        "Linear along road", "Clustered", "Scattered",
    ]),
    "secret": _simple("hamlet", "secret", [
        "Cannibals", "Cultists", "Dopplegangers", "Inbred",
        "Lycanthropes/Vampires", "Murderers",
    ]),
    "disposition": DISPOSITION,
}

VILLAGE_TABLES = {
    "size": _table("village", "size", "1d6", _SIZE),
    "occupation": _simple("village", "occupation", [
        "Brewing/Viticulture", "Fishing", "Hunting", "Logging", "Mining",
        "Pottery",
    ]),
    "layout": _simple("village", "layout", [
        "Grid", "Organic/Scattered", "Linear",
    ]),
    "special_location": _simple("village", "special_location", [
        "Abandoned building", "Apothecary", "Bakery", "Burnt/Ruined building",
        "Butcher", "Castle-farm", "Church", "Famous person's house",
        "General store", "Graveyard", "Guard post", "Guildhouse", "Gypsy wagon",
        "Horse stables", "Library", "Mill", "Monument/Memorial", "Orchard",
        "School", "Tailor",
    ]),
    "defense": _table("village", "defense", "1d8", ranged_entries(
        (1, 3, "Wooden palisade"),
        (4, 5, "Motte (mound)"),
        (6, 6, "Chevaux de frise"),
        (7, 7, "Moat (trench)"),
        (8, 8, "Watchtowers"),
    )),
    "notable_npc": _simple("village", "notable_npc", [
        "Aggressive guard", "Annoying minstrel", "Bandit in disguise",
        "Beggar who knows a lot", "Curious waitress", "Cute dog",
        "Frightened peasant", "Lonely widow", "Misunderstood witch",
        "Old fool/hag", "One-handed lumberjack", "Retired mercenary",
        "Seasoned adventurer", "Sick child", "Stubborn magician",
        "Talented craftsman", "Traveling merchant", "Troubled hunter",
        "Vampire/Werewolf hunter", "Village idiot",
    ]),
    "ruler": _simple("village", "ruler", [
        "Bandits", "Council", "Mayor", "Merchant", "Priest",
        "Vampire/Lycanthrope", "Village elder", "Witch",
    ]),
    "secret": _simple("village", "secret", [
        "Animals turned human", "Curse", "Elder god cult", "Eternal youth",
        "Hidden treasure", "Hiding outlaws", "Hivemind", "Inability to leave",
        "Pact with a demon", "Sadistic rituals", "Secret society",
        "Underground galleries",
    ]),
    "event": _simple("village", "event", [
        "Adventurers passing by", "Announcement by a crier",
        "Ceremony (wedding, etc.)", "Controlled by monsters", "Disappearances",
        "Famine", "Festival/Fair", "Fire", "Looting", "Market day", "Plague",
        "Visit of a notable (lord, etc.)",
    ]),
    "disposition": DISPOSITION,
}

CITY_TABLES = {
    "size": _table("city", "size", "1d6", _SIZE),
    "occupation": _simple("city", "occupation", [
        "Brewing/Viticulture", "Cattle breeding", "Farming", "Fishing",
        "Hunting", "Logging", "Metallurgy", "Mining", "Pottery", "Trading",
    ]),
    "characteristic": _table(
        "city",
        "characteristic",
        "1d20",
        ranged_entries((1, 5, "Nothing special"))
        + numbered_entries([
            "Corrupt", "Crowded", "Destroyed", "Dry", "Filthy", "Holy city",
            "Humid", "Narrow", "Noisy", "Open", "Renowned", "Silent", "Tiered",
            "Unsafe", "Windy",
        ], start_at=6),
    ),
    "appearance": _simple("city", "appearance", [
        "Cluttered", "Cobblestone", "Colorful", "Covered with art", "Dark",
        "Eerie", "Flowers", "Geometric", "Huge windows", "Light",
        "Lots of canals", "Lots of stairs", "Misaligned buildings",
        "Red bricks", "Stark", "Tall towers", "White marble", "Wondrous",
        "Wooden", "Specific color scheme",
    ]),
    "special_location": _simple("city", "special_location", [
        "Abandoned building", "Aqueduct", "Archaeological site", "Bridge",
        "Burnt/Ruined building", "Calvary", "Carriage stop",
        "Construction site", "Famous street", "Fighting pit", "Fountain",
        "Gallows", "Junkyard", "Market hall", "Military cemetery",
        "Monument/Memorial", "Park", "Pilgrimage", "Plaza", "Slave pit",
    ]),
    "notable_npc": _simple("city", "notable_npc", [
        "Aggressive guard", "Annoying minstrel", "Bandit in disguise",
        "Beggar who knows a lot", "Clever orphan", "Corrupted official",
        "Curious waitress", "Distracted scholar", "Haughty nobleman",
        "Lonely widow", "Nervous tax collector", "Penniless merchant",
        "Princess on the run", "Retired mercenary", "Seasoned adventurer",
        "Shady diplomat", "Stubborn wizard", "Talented craftsman",
        "Traveler from a distant land", "Vampire/Werewolf hunter",
    ]),
    "ruler": _table("city", "ruler", "1d8", ranged_entries(
        (1, 2, "Noble"),
        (3, 3, "Clergy"),
        (4, 4, "Council"),
        (5, 5, "Mayor"),
        (6, 6, "Merchants' guild"),
        (7, 7, "Thieves' guild"),
        (8, 8, "Vampire"),
    )),
    "event": _simple("city", "event", [
        "Announcement by a crier", "Assassination", "Ceremony (wedding, etc.)",
        "Disappearances", "Festival/Fair", "Fire", "Market day", "Plague",
        "Siege/Looting", "Tournament", "Vermin invasion",
        "Visit of a religious person",
    ]),
    "disposition": DISPOSITION,
}

CASTLE_TABLES = {
    "condition": _table("castle", "condition", "1d6", ranged_entries(
        (1, 1, "Perfect"),
        (2, 3, "Worn"),
        (4, 5, "Aged"),
        (6, 6, "Crumbling"),
    )),
    "keep_shape": _table("castle", "keep_shape", "1d6", ranged_entries(
        (1, 3, "Square/Rectangle"),
        (4, 5, "Round"),
        (6, 6, "Shell (hollow cylinder)"),
    )),
    "defensive_structure": _table(
        "castle",
        "defensive_structure",
        "1d6",
        ranged_entries(
            (1, 3, "Stone walls and towers"),
            (4, 4, "Moat (trench)"),
            (5, 5, "Motte (mound)"),
            (6, 6, "Wooden palisade"),
        ),
    ),
    "wall_shape": _simple("castle", "wall_shape", [
        "Square/Rectangle (4 towers)", "Trapezium (4 towers)",
        "Pentagon (5 towers)", "Hexagon (6 towers)", "Octagon (8 towers)",
        "Star (10 towers)", "Cross (12 towers)", "Circle (1d3+3 towers)",
    ]),
    "event": _simple("castle", "event", [
        "Assassination", "Big monster attack", "Ceremony (wedding, etc.)",
        "Festival/Fair", "Fire", "Plague", "Resources/Gold dwindling",
        "Rival lord scouting", "Siege/Looting",
        "Small monsters wanting to establish a lair nearby", "Tournament",
        "Visit of a notable person",
    ]),
    "disposition": DISPOSITION,
}

TOWER_TABLES = {
    "levels": _table("tower", "levels", "1d12", ranged_entries(
        (1, 1, "1"),
        (2, 3, "2"),
        (4, 6, "3"),
        (7, 9, "4"),
        (10, 11, "5"),
        (12, 12, "6"),
    )),
    "material": _table("tower", "material", "1d20", ranged_entries(
        (1, 5, "Cobblestone"),
        (6, 10, "Wood"),
        (11, 13, "Bricks"),
        (14, 16, "Sandstone"),
        (17, 18, "Limestone"),
        (19, 19, "Marble"),
        (20, 20, "Metal"),
    )),
    "shape": _table("tower", "shape", "1d20", ranged_entries(
        (1, 5, "Square"),
        (6, 10, "Round"),
        (11, 13, "Conical"),
        (14, 16, "Tilted"),
        (17, 17, "Asymmetrical"),
        (18, 18, "S-shaped"),
        (19, 19, "Stacked"),
        (20, 20, "Twisted"),
    )),
    "top_level": _simple("tower", "top_level", [
        "Aviary", "Beacon", "Duel platform", "Foghorn", "Golden apple tree",
        "Greenhouse", "High security prison", "Landing platform",
        "Lightning rod", "Lookout post", "Magic searchlight", "Monster nest",
        "Observatory", "Panic room", "Ruined/Overgrown", "Siege engine",
        "Throne room", "Treasure room", "Weather station", "Windmill",
    ]),
    "disposition": DISPOSITION,
}

ABBEY_TABLES = {
    "size": _table("abbey", "size", "1d6", ranged_entries(
        (1, 5, "small"),
        (6, 6, "major"),
    )),
    "garden": _simple("abbey", "garden", [
        "Flower garden", "Fountain", "Kitchen garden",
        "Physic garden (medicine)",
    ]),
    "farming": _simple("abbey", "farming", [
        "Barley (beer)", "Chickens (meat, eggs)", "Cotton",
        "Cows (meat, milk, cheese)", "Goats (meat, milk, cheese)",
        "Grapes (wine)", "Hops (beer)", "Orchard (fruits, preserves)",
        "Pigs (meat)", "Sheep (meat, wool)", "Vegetables",
        "Wheat (flour, bread)",
    ]),
    "fame": _table(
        "abbey",
        "fame",
        "1d20",
        numbered_entries([
            "Age", "Architecture", "Cattle baptism", "Curative (hot) springs",
            "Domain and landscapes", "Grave of well known bishop",
            "Key religious celebration", "Meals served to travelers",
            "Pilgrimage", "Power", "Quality of products",
        ])
        + ranged_entries((12, 20, "Religious artifact")),
    ),
    "event": _simple("abbey", "event", [
        "Broken device", "Cowls shrunken/dyed in red", "Demonic corruption",
        "Disappearance of the abbot", "Drought/Flood", "Festival/Fair", "Fire",
        "Looting", "Moles/Rats infestation", "Plague", "Scandal",
        "Visit of a notable person",
    ]),
    "disposition": DISPOSITION,
}

SETTLEMENT_TABLES: Dict[str, Dict[str, RollableTable]] = {
    "hamlet": HAMLET_TABLES,
    "village": VILLAGE_TABLES,
    "city": CITY_TABLES,
    "castle": CASTLE_TABLES,
    "tower": TOWER_TABLES,
    "abbey": ABBEY_TABLES,
}
