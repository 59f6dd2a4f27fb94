"""Landmark detail tables (the "nature" of each subcategory) and content tables."""

from typing import Dict

from ...core.tables import RollableTable, numbered_entries, ranged_entries


def _detail_table(sub_category: str, values) -> RollableTable:
    return RollableTable(
        id=f"landmark-{sub_category.replace('_', '-')}",
        name=sub_category.replace("_", " ").title(),
        category="landmarks",
        dice_formula=f"1d{len(values)}",
        entries=numbered_entries(values),
    )


FAUNA = _detail_table("fauna", [
    "Animal boneyard", "Anthill", "Beaver dam", "Giant animal skeleton",
    "Giant bird nest", "Giant snail shell", "Huge galleries",
    "Location covered with crows", "Predator's hunting ground", "Ransacked area",
])

FLORA_A = _detail_table("flora_a", [
    "Berry bush", "Bramble overgrown area", "Burnt area", "Centennial tree",
    "Dead tree", "Exotic tree", "Fallen tree", "Flower circle", "Fruit tree",
    "Giant flower",
])

FLORA_B = _detail_table("flora_b", [
    "Giant mushroom", "Hollow tree", "Impenetrable thicket", "Mushroom circle",
    "Mushroom spot", "Mycelial proliferation", "Rare plant spot", "Root arch",
    "Tree alignment", "Water-filled plant",
])

GEOLOGY_A = _detail_table("geology_a", [
    "Animal shaped rock", "Cave", "Chasm", "Crater", "Crystalline proliferation",
    "Giant crystal", "Lava pool", "Mudpit", "Pit", "Precious metal vein",
])

GEOLOGY_B = _detail_table("geology_b", [
    "Ravine", "Rift", "Rock hole", "Rock needle", "Scree", "Sinkhole",
    "Stone arch", "Stone bridge", "Stone stairs", "Very big rock",
])

HYDROLOGY = _detail_table("hydrology", [
    "Ford", "Hotspring", "Lake", "Pond", "Rapids", "River", "Spring", "Stream",
    "Water-filled cave", "Waterfall",
])

LABOR = _detail_table("labor", [
    "Barn", "Felled trees", "Field", "Granary", "Labor camp", "Meadow",
    "Quarry", "Straw man", "Swidden field", "Water tower",
])

MYSTERY = _detail_table("mystery", [
    "Carved rock", "Dolmen", "Hanging bones", "Heads on spikes", "Masks",
    "Pile of bones", "Rock stack", "Standing stones", "Straw dolls", "Totem",
])

RUIN = _detail_table("ruin", [
    "Abandoned tavern", "Burnt barn", "Collapsed mine entrance",
    "Decrepit mansion", "Desecrated church", "Destroyed house",
    "Overgrown tower", "Pile of rubble", "Razed village", "Ruined castle",
])

SMALL_STRUCTURE = _detail_table("small_structure", [
    "Bench", "Bivouac area", "Gazebo", "Hunter's cabin", "Hunting tower",
    "Kennel", "Outhouse", "Palisade", "Well", "Wooden fence",
])

TRAVEL = _detail_table("travel", [
    "Boardwalks", "Boundary stone", "Bridge", "Broken bridge", "Danger sign",
    "Ledge", "Signboard", "Stairs", "Suspension bridge", "Zipline",
])

WORSHIP = _detail_table("worship", [
    "Bell/Gong", "Calvary", "Cemetery", "Cross", "Holy place", "Idol", "Shrine",
    "Tomb", "Tumulus", "Vault",
])

AREA_UNDER_SPELL = _detail_table("area_under_spell", [
    "Always snowy area", "Anti-magic zone", "Area bringing back the dead",
    "Area where nothing grows", "Bad luck area", "Dome of darkness",
    "Force field", "Incessant cyclone", "Protection from Evil", "Time is frozen",
])

ENCHANTED_ITEM = _detail_table("enchanted_item", [
    "Curative basin", "Enchanted bell", "Fertility stone",
    "Magic fountain/spring", "Magic fruits tree", "Mutation pit",
    "Stone of knowledge", "Sword stuck in a rock", "Visions pool",
    "Witch cauldron",
])

MAGIC_PATH = _detail_table("magic_path", [
    "Breathable water", "Glowing mushrooms trail", "Illusory path",
    "Invisible bridge", "Levitating staircase", "Magic mirror",
    "Rainbow bridge", "Riddle bridge", "Walkable water", "Wormhole",
])

MAGIC_REMAINS = _detail_table("magic_remains", [
    "Area covered with fairy dust", "Bloody altar", "Corpse covered in crystals",
    "Corrupt area", "Destroyed golem", "Magic battlefield", "Old shrine",
    "Petrified travelers", "Remnants of a ceremony", "Signs of an explosion",
])

PLACE_OF_POWER = _detail_table("place_of_power", [
    "Ancient burial grounds", "Birthplace/Tomb of a saint", "Magic beacon",
    "Mana well", "Neolithic rock monument", "Preserved natural place",
    "Root of the World Tree", "Sacred waters", "Sun focal point",
    "Ziggurat of old",
])

STRANGE_PHENOMENON = _detail_table("strange_phenomenon", [
    "Everburning tree", "Evermelting ice", "Floating crystal", "Ghost building",
    "Luminous engravings", "Reverse waterfall", "Singing crystal",
    "Strong magnetism", "Talking rock", "Whispers in the wind",
])

LANDMARK_DETAIL_TABLES: Dict[str, RollableTable] = {
    "fauna": FAUNA,
    "flora_a": FLORA_A,
    "flora_b": FLORA_B,
    "geology_a": GEOLOGY_A,
    "geology_b": GEOLOGY_B,
    "hydrology": HYDROLOGY,
    "labor": LABOR,
    "mystery": MYSTERY,
    "ruin": RUIN,
    "small_structure": SMALL_STRUCTURE,
    "travel": TRAVEL,
    "worship": WORSHIP,
    "area_under_spell": AREA_UNDER_SPELL,
    "enchanted_item": ENCHANTED_ITEM,
    "magic_path": MAGIC_PATH,
    "magic_remains": MAGIC_REMAINS,
    "place_of_power": PLACE_OF_POWER,
    "strange_phenomenon": STRANGE_PHENOMENON,
}

# Content detail

HAZARD_TABLE = RollableTable(
    id="landmark-hazard",
    name="Hazard",
    category="landmarks",
    dice_formula="1d20",
    entries=numbered_entries([
        "Acid pits", "Allergenic plants", "Ancient dormant illness", "Curse",
        "Dangerous footing", "Easy to get lost", "Fog",
        "Fumes (smoke, toxic, etc.)", "Ghosts", "Hallucinogenic spores",
        "Hidden pits", "Hunting traps", "Magic corruption", "Plague",
        "Quicksands", "Radiations", "Sabotage/Trap", "Unstable/Likely to break",
        "Venomous animals", "Volcanic area",
    ]),
)

EMPTY_INFO_TABLE = RollableTable(
    id="landmark-empty-info",
    name="Information",
    description="Clue or lore found at an otherwise empty landmark",
    category="landmarks",
    dice_formula="1d20",
    entries=ranged_entries((1, 5, "Info about nearby monsters"))
    + numbered_entries([
        "Alchemy recipe", "Curative effects (water, plant)",
        "Directions to a settlement", "Dungeon location", "Future event",
        "Important past event", "Legend/Myth", "Local custom", "Password",
        "Secret passage location", "Spell/Ritual", "Tale about a magic weapon",
        "Toxicity of something", "Upcoming weather",
        "Words from a monster language",
    ], start_at=6),
)

SPECIAL_TABLE = RollableTable(
    id="landmark-special",
    name="Special",
    category="landmarks",
    dice_formula="1d10",
    entries=ranged_entries(
        (1, 1, "Arbitrate a dispute"),
        (2, 2, "Prevent a threat"),
        (3, 3, "Solve a puzzle/riddle"),
        (4, 6, "Uncover a mystery"),
        (7, 10, "NPC(s)/Monster(s) in need"),
    ),
)

DISPUTES_TABLE = RollableTable(
    id="landmark-disputes",
    name="Disputes",
    category="landmarks",
    dice_formula="1d6",
    entries=numbered_entries([
        "Adultery", "Broken trade agreement", "Division of an inheritance",
        "Murder investigation", "Territorial boundaries", "Trial",
    ]),
)

THREATS_TABLE = RollableTable(
    id="landmark-threats",
    name="Threats",
    category="landmarks",
    dice_formula="1d6",
    entries=numbered_entries([
        "Evil ceremony", "Flood", "Frenzied migratory animals",
        "Magic corruption", "Plague", "Wildfire",
    ]),
)

MYSTERIES_TABLE = RollableTable(
    id="landmark-mysteries",
    name="Mysteries",
    category="landmarks",
    dice_formula="1d10",
    entries=numbered_entries([
        "Abductions", "Alleged ghost", "Curse", "Miracle", "Missing items",
        "Mutations", "Odd footprints/tracks", "Stalker", "Strange lights/noises",
        "Unexplained deaths",
    ]),
)

NPC_PROBLEMS_TABLE = RollableTable(
    id="landmark-npc-problems",
    name="NPC Problems",
    category="landmarks",
    dice_formula="1d10",
    entries=numbered_entries([
        "Amnesia", "Attacked/Chased", "Disappearance", "Hunger/Thirst",
        "Imprisoned/Enslaved", "Injured/Sick", "Lost", "Stuck/Bogged down",
        "Theft", "Trapped",
    ]),
)

# Special value -> (detail field, follow-up table)
SPECIAL_FOLLOW_UPS = {
    "Arbitrate a dispute": ("dispute", DISPUTES_TABLE),
    "Prevent a threat": ("threat", THREATS_TABLE),
    "Uncover a mystery": ("mystery", MYSTERIES_TABLE),
    "NPC(s)/Monster(s) in need": ("npc_problem", NPC_PROBLEMS_TABLE),
}
