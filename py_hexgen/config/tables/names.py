"""Name components and structure table for settlement, castle, abbey and faction names."""

from typing import Dict, List

from ...core.tables import RollableTable, numbered_entries

# Letters refer to NAME_COMPONENTS; any other text is literal.
NAME_STRUCTURE = RollableTable(
    id="name-structure",
    name="Settlement Name Structure",
    category="names",
    dice_formula="1d30",
    entries=numbered_entries([
        "BA", "BF", "BHF", "BH", "CA", "CF", "CH", "D", "DA", "DF", "DH",
        "D-by-sea", "D-in-D", "D-le-D", "D-les-bains", "D-on-the-hill",
        "Dington", "Dsby", "Dthorpe", "Dton", "EA", "EB", "ED", "EF", "EH",
        "GB", "GD", "Trou-au-D", "Trou-de-D", "Val-D",
    ]),
)

NAME_COMPONENTS: Dict[str, List[str]] = {
    # Buildings
    "A": [
        "Abbey", "Arch", "Bank", "Barrack", "Bench", "Bridge", "Castle",
        "Chapel", "Church", "Court", "Cross", "Farm", "Forge", "Gate", "Hall",
        "Home", "Hospital", "House", "Inn", "Mall", "Market", "Mill", "Mine",
        "Post", "Road", "Stall", "Temple", "Tower", "Union", "Wall",
    ],
    # Nouns
    "B": [
        "Acorn", "Angel", "Apple", "Atelier", "Autumn", "Axe", "Baker", "Bard",
        "Baron", "Barrow", "Berry", "Birch", "Bird", "Boar", "Book", "Bow",
        "Butcher", "Candle", "Cheese", "Cloud", "Corn", "Cow", "Crow", "Dawn",
        "Day", "Deer", "Demon", "Dragon", "Dream", "Dusk", "Dust", "Dwarf",
        "Eagle", "Elf", "Feather", "Fire", "Fish", "Flower", "Fog", "Fox",
        "Frog", "Ghost", "Gnoll", "Goblin", "Grave", "Halfling", "Hare",
        "Hawk", "Heaven", "Hell", "Hook", "Hope", "Horn", "Horse", "Hunter",
        "Knight", "Kobold", "Leaf", "Letter", "Lion", "Mage", "Moon", "Night",
        "Oak", "Orchid", "Pine", "Pork", "Rabbit", "Rain", "Ram", "River",
        "Robin", "Rose", "Salt", "Seed", "Sky", "Snake", "Snow", "Sorrow",
        "Spice", "Spring", "Squirrel", "Star", "Summer", "Sun", "Sword",
        "Thief", "Thorn", "Thunder", "Toad", "Tournament", "Tulip", "Violet",
        "Warrior", "Water", "Wind", "Winter", "Witch", "Wolf", "Wyvern",
    ],
    # First names
    "C": [
        "Anna", "Arthur", "Bernard", "Charles", "Elizabeth", "Fanny", "George",
        "Helen", "Ilia", "John", "Kathleen", "King", "Louis", "Marcus", "Mary",
        "Nicholas", "Prince", "Princess", "Queen", "Tilly",
    ],
    # City names
    "D": [
        "Avery", "Bayley", "Carm", "Dun", "Ensal", "Folton", "Galgar", "Haye",
        "Idar", "Julvet", "Kanth", "Loy", "Marsan", "Nisme", "Ourar", "Peulin",
        "Rundur", "Solin", "Thaas", "Unvary", "Vanau", "Wark", "Yverne",
        "Zalek",
    ],
    # Adjectives
    "E": [
        "Bad", "Black", "Bloody", "Blue", "Bony", "Brave", "Brown", "Burnt",
        "Charming", "Coal", "Cold", "Copper", "Coral", "Crystal", "Damp",
        "Dark", "Dry", "Dusty", "False", "Fast", "Free", "Giant", "Glass",
        "Golden", "Good", "Gray", "Great", "Green", "Hidden", "Hot", "Indigo",
        "Iron", "Light", "Long", "Metal", "Mithral", "Obsidian", "Purple",
        "Red", "Rock", "Royal", "Silent", "Silver", "Small", "Stone", "True",
        "White", "Wild", "Wine", "Yellow",
    ],
    # Settlement types
    "F": [
        "Borough", "Bourg", "Camp", "Cester", "Citadel", "City", "County",
        "Dorf", "Ham", "Hamlet", "Haven", "Heim", "Keep", "Stead", "Town",
        "Village", "Ville", "Ward", "Wihr", "Worth",
    ],
    # Directions
    "G": [
        "Bottom", "Down", "East", "Far", "Fort", "Haute", "High", "Little",
        "Lost", "Low", "Mount", "New", "North", "Old", "Port", "Saint",
        "South", "Under", "Up", "West",
    ],
    # Nature
    "H": [
        "Bay", "Beach", "Bone", "Break", "Burrow", "Cliff", "Corner", "Creek",
        "Dale", "End", "Fall", "Field", "Forest", "Garden", "Glade", "Glen",
        "Grove", "Heid", "Helm", "Hill", "Hold", "Hole", "Hollow", "Island",
        "Lake", "Land", "Limit", "Marsh", "Mont", "Moor", "Mount", "Mountain",
        "Park", "Pass", "Path", "Peak", "Plain", "Point", "Pool", "Rest",
        "Run", "Source", "Summit", "Trail", "Tree", "Valley", "View", "Way",
        "Well", "Wood",
    ],
}

CASTLE_NAME_FIRST = [
    "Apple", "Battle", "Black", "Bleak", "Bloody", "Bright", "Broken", "Cloud",
    "Dark", "Dawn", "Dragon", "Dusk", "Fire", "Golden", "Hammer", "Hawk",
    "Horse", "Ice", "Light", "Lion", "Moon", "Oak", "Raven", "Red", "River",
    "Rose", "Silver", "Star", "Stone", "Windy",
]

CASTLE_NAME_SECOND = [
    "Bane", "Bridge", "Fall", "Fang", "Foot", "Heart", "Herd", "Hold", "Hook",
    "Keep", "Maw", "Mist", "Moor", "Peak", "Rock", "Shield", "Skull", "Song",
    "Soul", "Storm", "Thorn", "Vale", "Way", "Wood",
]

ABBEY_NAME_PREFIXES = [
    "Blessed-Land", "Clear-Water", "Fruitful-Garden", "Good-Help", "Good-Hope",
    "Good-Relief", "Our-Lady-of-Chastity", "Our-Lady-of-Mercy",
    "Our-Lady-of-the-Poor", "Peaceful-Soul", "Sacred-Heart",
]

SAINTS = [
    "Adélie", "Agath", "Alexia", "Aubreda", "Bardolphus", "Barthélemy",
    "Beatrix", "Bérengérius", "Bernardus", "Cecilia", "Cédany", "Émelote",
    "Gaufridus", "Geffrey", "Géroldin", "Guillotin", "Jaclyn", "Jacomus",
    "Madeleine", "Marion", "Mariorie", "Martin", "Mary", "Melchior", "Paul",
    "Pétasse", "Peter", "Remy", "Thomasse", "Victor",
]

# Placeholders are NAME_COMPONENTS letters
TOWER_NAME_PATTERNS = [
    "{E} Tower",
    "Tower of {B}",
    "{C}'s Tower",
    "The {E} Spire",
    "{B} Tower",
]

FACTION_PREFIXES = [
    "The", "Order of", "House of", "Clan", "Brotherhood of", "Guild of",
    "League of", "Council of", "Knights of", "Lords of", "Children of",
]

FACTION_TYPES = [
    "Order", "Brotherhood", "Guild", "League", "Council", "Covenant",
    "Alliance", "Compact", "Pact", "Circle", "Cabal", "Syndicate",
]

# {prefix} and {type} draw from FACTION_PREFIXES / FACTION_TYPES
FACTION_NAME_PATTERNS = [
    "The {E} {B}s",
    "Order of the {B}",
    "House {D}",
    "The {B} {type}",
    "{E} {type}",
    "Knights of {D}",
    "The {D} {type}",
    "{prefix} the {E} {B}",
]
