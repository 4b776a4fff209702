"""Built-in word lists bundled with the game.

These are small starter vocabularies, good enough to play offline and to act
as the fallback set when a configured source cannot be reached. Entries are
raw: normalization (lowercase, minimum length, alphabetic only) happens when
the dictionary is loaded.
"""

from __future__ import annotations

from typing import Dict, Tuple

ENGLISH_WORDS: Tuple[str, ...] = (
    "the", "and", "that", "have", "for", "not", "with", "you", "this", "but",
    "his", "from", "they", "say", "her", "she", "will", "one", "all", "would",
    "there", "their", "what", "out", "about", "who", "get", "which", "when", "make",
    "can", "like", "time", "just", "him", "know", "take", "people", "into", "year",
    "your", "good", "some", "could", "them", "see", "other", "than", "then", "now",
    "look", "only", "come", "its", "over", "think", "also", "back", "after", "use",
    "two", "how", "our", "work", "first", "well", "way", "even", "new", "want",
    "because", "any", "these", "give", "day", "most", "cat", "dog", "man", "car",
    "house", "tree", "bird", "word", "play", "game", "ball", "book", "food", "run",
    "jump", "talk", "walk", "love", "hate", "feel", "city", "blue", "red", "green",
    "yellow", "black", "white", "big", "small", "fast", "slow", "high", "low", "old",
    "young", "happy", "sad", "hot", "cold", "easy", "hard", "early", "late", "long",
    "short", "right", "wrong", "full", "empty", "rich", "poor", "dark", "light", "sweet",
    "sour", "clean", "dirty", "dry", "wet", "soft", "cheap", "dear", "thin",
    "thick", "far", "near", "deep", "flat", "loud", "quiet", "quick", "sharp",
    "board", "piece", "king", "queen", "rock", "paper", "night", "rain", "snow",
    "wind", "cloud", "earth", "fire", "water", "dust", "smoke", "fog", "ice", "steam",
    "drink", "milk", "juice", "tea", "coffee", "wine", "beer", "bread", "cake", "cheese",
    "meat", "fish", "rice", "salt", "sugar", "fruit", "apple", "pear", "orange", "lemon",
    "table", "chair", "door", "window", "floor", "wall", "roof", "bed", "desk", "lamp",
    "phone", "radio", "clock", "watch", "ring", "hat", "coat", "shoe", "boot", "sock",
    "head", "eye", "ear", "nose", "mouth", "hand", "foot", "arm", "leg", "bone",
    "brain", "heart", "blood", "skin", "hair", "road", "path", "bridge", "river", "lake",
)

SPANISH_WORDS: Tuple[str, ...] = (
    "que", "ser", "haber", "por", "con", "para", "como", "estar", "tener",
    "todo", "pero", "hacer", "poder", "decir", "este", "otro", "ese", "ver",
    "porque", "dar", "cuando", "muy", "sin", "vez", "mucho", "saber", "sobre",
    "alguno", "mismo", "hasta", "dos", "querer", "entre", "primero", "desde",
    "grande", "eso", "nos", "llegar", "pasar", "tiempo", "ella", "uno",
    "bien", "poco", "deber", "entonces", "poner", "cosa", "tanto", "hombre", "parecer",
    "nuestro", "casa", "perro", "gato", "libro", "agua", "vida", "sol", "luna", "mar",
    "cielo", "tierra", "fuego", "aire", "rojo", "azul", "verde", "negro", "blanco",
    "bueno", "malo",
)

FRENCH_WORDS: Tuple[str, ...] = (
    "une", "est", "que", "elle", "nous", "vous", "ils", "elles", "qui",
    "pas", "dans", "pour", "sur", "avec", "plus", "par", "mais", "leur", "sont",
    "mon", "ton", "son", "lui", "tout", "voir", "faire", "dire", "aller", "venir",
    "prendre", "savoir", "pouvoir", "vouloir", "aimer", "jour", "ans", "temps",
    "homme", "femme", "petit", "grand", "bien", "mal", "mer", "terre", "eau", "feu",
    "air", "ciel", "soleil", "lune", "arbre", "fleur", "ami", "main", "pied",
    "chien", "chat", "maison", "ville", "rue", "pays", "monde", "livre", "mot", "nom",
    "bonjour", "merci", "oui", "non", "rouge", "bleu", "vert", "noir", "blanc", "bon",
)

ANIMAL_WORDS: Tuple[str, ...] = (
    "dog", "cat", "bird", "fish", "lion", "tiger", "bear", "wolf", "fox", "deer",
    "mouse", "rat", "frog", "toad", "snake", "lizard", "turtle", "eagle", "hawk", "owl",
    "duck", "goose", "swan", "chicken", "horse", "cow", "sheep", "goat", "pig", "rabbit",
    "monkey", "ape", "zebra", "giraffe", "elephant", "rhino", "hippo", "whale", "dolphin",
    "shark", "seal", "walrus", "penguin", "ant", "bee", "wasp", "fly", "moth", "spider",
    "crab",
)

FOOD_WORDS: Tuple[str, ...] = (
    "apple", "orange", "banana", "grape", "melon", "lemon", "lime", "peach", "plum",
    "cherry", "bread", "cake", "cookie", "pie", "pasta", "rice", "soup", "salad", "meat",
    "beef", "pork", "lamb", "fish", "tuna", "salmon", "milk", "cheese", "cream", "butter",
    "yogurt", "egg", "sugar", "salt", "pepper", "spice", "herb", "tea", "coffee", "juice",
    "water", "beer", "wine", "pizza", "burger", "fries", "onion", "garlic", "carrot",
    "potato", "tomato",
)

BUILTIN_WORD_LISTS: Dict[str, Tuple[str, ...]] = {
    "english": ENGLISH_WORDS,
    "spanish": SPANISH_WORDS,
    "french": FRENCH_WORDS,
    "animals": ANIMAL_WORDS,
    "food": FOOD_WORDS,
}

FALLBACK_KEY = "english"
