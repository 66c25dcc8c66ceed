"""
Theme content used by the placeholder generation stages.

All generated text comes from the tables in this module. Riddles are grouped
by theme and difficulty tier; hiding places by location type. Hazard tables
drive the safety stage.
"""

from typing import Dict, List

# =====================================================================
# Story
# =====================================================================

STORY_TEMPLATES: Dict[str, Dict[str, str]] = {
    "pirates": {
        "label": "pirate",
        "hero": "Captain Coral",
        "goal": "the lost treasure chest",
        "opening": "Ahoy! Captain Coral's map was torn into pieces by a cheeky parrot.",
        "closing": "Follow every clue and the treasure will be yours, brave crew!",
    },
    "nature": {
        "label": "nature",
        "hero": "Willow the Fox",
        "goal": "the golden acorn",
        "opening": "Willow the Fox hid the golden acorn before the first frost.",
        "closing": "Listen to the leaves and they will guide you to it!",
    },
    "city": {
        "label": "city",
        "hero": "Detective Pip",
        "goal": "the missing city key",
        "opening": "The mayor lost the shiny city key and Detective Pip needs helpers.",
        "closing": "Keep your eyes open, junior detectives, the key is close!",
    },
    "space": {
        "label": "space",
        "hero": "Astronaut Nova",
        "goal": "the runaway star crystal",
        "opening": "Astronaut Nova's star crystal floated out of the rocket window.",
        "closing": "Count down from three and blast off after it!",
    },
    "mystery": {
        "label": "mystery",
        "hero": "Inspector Quill",
        "goal": "the secret message",
        "opening": "Inspector Quill found a note written in invisible ink.",
        "closing": "Solve every riddle and the secret will be revealed!",
    },
    "animals": {
        "label": "animal",
        "hero": "Benny the Bear",
        "goal": "the honey pot",
        "opening": "Benny the Bear woke up from his nap and his honey pot was gone!",
        "closing": "Sniff, search and stomp your way to the honey!",
    },
}

RIDDLES: Dict[str, Dict[str, List[str]]] = {
    "pirates": {
        "easy": [
            "Arr! Look for something a pirate could sit on!",
            "Find a place where a parrot might hide!",
            "Search where the ship's cat likes to nap!",
        ],
        "medium": [
            "I have no sails but I hold many treasures. What am I?",
            "Walk the plank to a spot where things are kept safe and dry.",
            "Where would a pirate stash a map so the rain can't find it?",
        ],
        "hard": [
            "I guard secrets without a sword, and open only for those who seek. Where am I?",
            "Count the steps a captain takes, then look where shadows meet the deck.",
            "North of nothing, south of something, the next piece waits where quiet lives.",
        ],
    },
    "nature": {
        "easy": [
            "Look for something green that grows!",
            "Find a place where a bird could land!",
            "Search somewhere a bunny might hop!",
        ],
        "medium": [
            "I have roots but never walk. Find me or something near me!",
            "Where do the flowers drink when the sun is high?",
            "Find the spot where leaves would love to rest.",
        ],
        "hard": [
            "I change my coat four times a year but never leave home. Look close to me.",
            "Follow the path the morning sun takes and stop where it first says hello.",
            "Busy workers buzz near here, but you need only your eyes to find the clue.",
        ],
    },
    "city": {
        "easy": [
            "Find a place where you can wait for a friend!",
            "Look for something with a door!",
            "Search near something that holds letters!",
        ],
        "medium": [
            "I have many windows but I'm not a building. Where might I be?",
            "Where do the city's stories wait to be read?",
            "Find a place where people rest their feet after a long walk.",
        ],
        "hard": [
            "I open every morning and close every night, yet I never sleep. Search near me.",
            "Take the route a letter travels and stop before it leaves home.",
            "Three clues ago you passed me. Walk back in your mind and look again.",
        ],
    },
    "space": {
        "easy": [
            "Find something round like a planet!",
            "Look somewhere high like the stars!",
            "Search where a rocket could land!",
        ],
        "medium": [
            "I'm cold inside and full of snacks for hungry astronauts. Look nearby!",
            "Where would an alien hide if it wanted to watch the sky?",
            "Find the place that glows when the lights go out.",
        ],
        "hard": [
            "I orbit nothing yet spin all day. Find the place where I am kept.",
            "Travel to where the light comes in and look below the horizon.",
            "Mission control says: half of ten steps, then look up for the signal.",
        ],
    },
    "mystery": {
        "easy": [
            "Look for something you can open!",
            "Find a place that is very quiet!",
            "Search where something soft lives!",
        ],
        "medium": [
            "I have a face but no eyes and hands but no fingers. Search near me!",
            "Where do words sleep standing up?",
            "Find the spot where footprints begin each morning.",
        ],
        "hard": [
            "The more you take, the more you leave behind. Follow them to the next clue.",
            "I am always in front of you but can't be seen. Walk toward me and look down.",
            "What has keys but can't open locks? The answer is near where the clue hides.",
        ],
    },
    "animals": {
        "easy": [
            "Find a cozy place where a kitten could curl up!",
            "Look somewhere a puppy might hide a bone!",
            "Search where a mouse could squeak!",
        ],
        "medium": [
            "I'm where a sleepy bear would nap after lunch. Take a peek!",
            "Where would a squirrel hide a snack for winter?",
            "Find the spot where a turtle could rest in the shade.",
        ],
        "hard": [
            "An owl asks who, a frog asks when. Look where both would wait in the quiet.",
            "Follow the tracks that are not there and stop where a cat would sit to watch.",
            "I have a trunk but no elephant. Search near the one you can find.",
        ],
    },
}

# =====================================================================
# Geography
# =====================================================================

PLACES: Dict[str, List[str]] = {
    "indoor": [
        "bookshelf",
        "sofa cushions",
        "toy box",
        "kitchen table",
        "stairs",
        "window sill",
        "laundry basket",
        "coat rack",
    ],
    "outdoor": [
        "big tree",
        "flower bed",
        "garden bench",
        "pond",
        "mailbox",
        "sandbox",
        "front porch",
        "vegetable patch",
    ],
}

LOCATION_SAFETY_SCORES: Dict[str, int] = {"indoor": 9, "mixed": 8, "outdoor": 7}

# =====================================================================
# Safety
# =====================================================================

# Hazardous places and the safe place that replaces them
HAZARD_REPLACEMENTS: Dict[str, str] = {
    "stairs": "hallway rug",
    "pond": "garden gnome",
    "street": "front porch",
    "road": "garden gate",
    "stove": "fruit bowl",
    "oven": "bread box",
    "pool": "picnic blanket",
    "balcony": "reading corner",
}

# Terms that cannot be rewritten into something safe
FORBIDDEN_TERMS: List[str] = [
    "knife",
    "matches",
    "lighter",
    "weapon",
    "poison",
    "medicine",
    "chemicals",
]

LOCATION_SAFETY_NOTES: Dict[str, str] = {
    "indoor": "Walk, don't run, and leave everything the way you found it.",
    "outdoor": "Stay inside the yard and keep away from water and roads.",
    "mixed": "Walk carefully between rooms and stay inside the yard when outside.",
}

SUPERVISION_NOTE = "A grown-up should stay nearby for this clue."

# =====================================================================
# Visuals
# =====================================================================

VISUAL_STYLES: Dict[str, str] = {
    "pirates": "sunny storybook",
    "nature": "soft watercolor",
    "city": "bright cartoon",
    "space": "glowing neon",
    "mystery": "moonlit sketch",
    "animals": "friendly crayon",
}

# =====================================================================
# Creative
# =====================================================================

INTERACTIVE_ELEMENTS: Dict[str, List[str]] = {
    "pirates": ["Say 'Arrr!' like a pirate", "Do a treasure dance", "Count to ten in your pirate voice"],
    "nature": ["Flap like a butterfly", "Name three colors you can see", "Take three deep forest breaths"],
    "city": ["Beep like a busy taxi", "March like a parade", "Wave to an imaginary neighbor"],
    "space": ["Count down from five", "Float like an astronaut", "Make a rocket whoosh"],
    "mystery": ["Whisper the secret password", "Tiptoe like a detective", "Look through your magnifying fingers"],
    "animals": ["Roar like a lion", "Hop like a bunny", "Waddle like a penguin"],
}

SUCCESS_MESSAGES: Dict[str, List[str]] = {
    "pirates": ["Shiver me timbers, you found it!", "Yo ho ho, another piece of the map!"],
    "nature": ["The forest is proud of you!", "You found it, nature explorer!"],
    "city": ["Case cracked, detective!", "The whole city is cheering for you!"],
    "space": ["Mission accomplished, astronaut!", "Out of this world!"],
    "mystery": ["Mystery solved!", "Brilliant deduction!"],
    "animals": ["Roar-some job!", "You're a wild success!"],
}
