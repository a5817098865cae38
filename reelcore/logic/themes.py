"""Static theme data: symbol catalogs for every bundled theme.

Regular symbols are ``(id, display_token, payout_value, base_probability, color)``.
Wild and scatter entries are ``(id, display_token, color)``; their probability
comes from the rarity settings when a catalog is built.
"""
from typing import Any


THEMES: dict[str, dict[str, Any]] = {
    "classic": {
        "name": "Classic Fruits",
        "symbols": [
            ("cherry", "🍒", 5, 0.3, "#ff6b6b"),
            ("lemon", "🍋", 10, 0.25, "#ffd93d"),
            ("orange", "🍊", 15, 0.2, "#ff8c42"),
            ("grapes", "🍇", 25, 0.15, "#a8e6cf"),
            ("bell", "🔔", 50, 0.07, "#88d8c0"),
            ("diamond", "💎", 100, 0.02, "#b4a7d6"),
            ("star", "⭐", 200, 0.01, "#ffd700"),
        ],
        "wild": ("wild", "🃏", "#ff1493"),
        "scatter": ("scatter", "🌟", "#ffd700"),
    },
    "ocean": {
        "name": "Ocean Adventure",
        "symbols": [
            ("fish", "🐠", 5, 0.3, "#00bcd4"),
            ("octopus", "🐙", 10, 0.25, "#9c27b0"),
            ("whale", "🐋", 15, 0.2, "#2196f3"),
            ("shark", "🦈", 25, 0.15, "#607d8b"),
            ("dolphin", "🐬", 50, 0.07, "#03a9f4"),
            ("treasure", "💰", 100, 0.02, "#ffc107"),
            ("pearl", "🔮", 200, 0.01, "#e1bee7"),
        ],
        "wild": ("wild", "🌊", "#00acc1"),
        "scatter": ("scatter", "⚓", "#795548"),
    },
    "space": {
        "name": "Space Explorer",
        "symbols": [
            ("alien", "👽", 5, 0.3, "#4caf50"),
            ("rocket", "🚀", 10, 0.25, "#f44336"),
            ("planet", "🪐", 15, 0.2, "#ff9800"),
            ("ufo", "🛸", 25, 0.15, "#9c27b0"),
            ("astronaut", "👨‍🚀", 50, 0.07, "#2196f3"),
            ("galaxy", "🌌", 100, 0.02, "#673ab7"),
            ("star", "✨", 200, 0.01, "#ffc107"),
        ],
        "wild": ("wild", "🌟", "#ffeb3b"),
        "scatter": ("scatter", "🌍", "#4caf50"),
    },
    "animals": {
        "name": "Wild Animals",
        "symbols": [
            ("monkey", "🐵", 5, 0.3, "#8d6e63"),
            ("tiger", "🐅", 10, 0.25, "#ff9800"),
            ("elephant", "🐘", 15, 0.2, "#607d8b"),
            ("lion", "🦁", 25, 0.15, "#ffc107"),
            ("panda", "🐼", 50, 0.07, "#9e9e9e"),
            ("unicorn", "🦄", 100, 0.02, "#e91e63"),
            ("dragon", "🐉", 200, 0.01, "#f44336"),
        ],
        "wild": ("wild", "🦊", "#ff5722"),
        "scatter": ("scatter", "🌿", "#4caf50"),
    },
    "food": {
        "name": "Delicious Treats",
        "symbols": [
            ("pizza", "🍕", 5, 0.3, "#ff6b35"),
            ("burger", "🍔", 10, 0.25, "#8d6e63"),
            ("donut", "🍩", 15, 0.2, "#ff69b4"),
            ("cake", "🎂", 25, 0.15, "#ffc107"),
            ("icecream", "🍦", 50, 0.07, "#81c784"),
            ("candy", "🍭", 100, 0.02, "#e91e63"),
            ("cookie", "🍪", 200, 0.01, "#8d6e63"),
        ],
        "wild": ("wild", "🍰", "#f06292"),
        "scatter": ("scatter", "🎉", "#ff9800"),
    },
    "gems": {
        "name": "Precious Gems",
        "symbols": [
            ("ruby", "❤️", 5, 0.3, "#f44336"),
            ("emerald", "💚", 10, 0.25, "#4caf50"),
            ("sapphire", "💙", 15, 0.2, "#2196f3"),
            ("amethyst", "💜", 25, 0.15, "#9c27b0"),
            ("topaz", "💛", 50, 0.07, "#ffc107"),
            ("diamond", "💎", 100, 0.02, "#e1f5fe"),
            ("crown", "👑", 200, 0.01, "#ffd700"),
        ],
        "wild": ("wild", "✨", "#ffffff"),
        "scatter": ("scatter", "💍", "#ff69b4"),
    },
    "cards": {
        "name": "Card Royale",
        "symbols": [
            ("clubs", "♣️", 5, 0.3, "#2c3e50"),
            ("diamonds", "♦️", 10, 0.25, "#e74c3c"),
            ("hearts", "♥️", 15, 0.2, "#e74c3c"),
            ("spades", "♠️", 25, 0.15, "#2c3e50"),
            ("jack", "🎭", 50, 0.07, "#9b59b6"),
            ("queen", "👸", 100, 0.02, "#8e44ad"),
            ("king", "👑", 200, 0.01, "#f1c40f"),
        ],
        "wild": ("wild", "🃏", "#3498db"),
        "scatter": ("scatter", "🎴", "#e67e22"),
    },
    "chess": {
        "name": "Chess Masters",
        "symbols": [
            ("pawn", "♟️", 5, 0.3, "#7f8c8d"),
            ("knight", "♞", 10, 0.25, "#95a5a6"),
            ("bishop", "♝", 15, 0.2, "#bdc3c7"),
            ("rook", "♜", 25, 0.15, "#34495e"),
            ("queen", "♛", 50, 0.07, "#9b59b6"),
            ("king", "♚", 100, 0.02, "#f1c40f"),
            ("checkmate", "⚔️", 200, 0.01, "#c0392b"),
        ],
        "wild": ("wild", "🏆", "#d4af37"),
        "scatter": ("scatter", "♟︎", "#2980b9"),
    },
    "monsters": {
        "name": "Monster Mayhem",
        "symbols": [
            ("ghost", "👻", 5, 0.3, "#ecf0f1"),
            ("alien", "👾", 10, 0.25, "#9b59b6"),
            ("goblin", "👺", 15, 0.2, "#e74c3c"),
            ("ogre", "👹", 25, 0.15, "#c0392b"),
            ("zombie", "🧟", 50, 0.07, "#27ae60"),
            ("vampire", "🧛", 100, 0.02, "#8e44ad"),
            ("dragon", "🐲", 200, 0.01, "#d35400"),
        ],
        "wild": ("wild", "🔮", "#9b59b6"),
        "scatter": ("scatter", "⚡", "#f39c12"),
    },
    "wolves": {
        "name": "Wolf Pack",
        "symbols": [
            ("paw", "🐾", 5, 0.3, "#95a5a6"),
            ("moon", "🌙", 10, 0.25, "#f1c40f"),
            ("forest", "🌲", 15, 0.2, "#27ae60"),
            ("howl", "🐺", 25, 0.15, "#7f8c8d"),
            ("alpha", "🐺‍⬛", 50, 0.07, "#34495e"),
            ("hunter", "🏹", 100, 0.02, "#c0392b"),
            ("fullmoon", "🌕", 200, 0.01, "#f39c12"),
        ],
        "wild": ("wild", "🔥", "#e74c3c"),
        "scatter": ("scatter", "🌟", "#f1c40f"),
    },
    "egypt": {
        "name": "Ancient Egypt",
        "symbols": [
            ("ankh", "☥", 5, 0.3, "#f39c12"),
            ("eye", "👁️", 10, 0.25, "#3498db"),
            ("cat", "😺", 15, 0.2, "#f1c40f"),
            ("scarab", "🪲", 25, 0.15, "#27ae60"),
            ("mummy", "🧟", 50, 0.07, "#ecf0f1"),
            ("sphinx", "🦁", 100, 0.02, "#d35400"),
            ("pyramid", "🏯", 200, 0.01, "#f39c12"),
        ],
        "wild": ("wild", "🧞", "#3498db"),
        "scatter": ("scatter", "📜", "#7f8c8d"),
    },
    "music": {
        "name": "Music Beats",
        "symbols": [
            ("note", "🎵", 5, 0.3, "#3498db"),
            ("clef", "🎼", 10, 0.25, "#9b59b6"),
            ("guitar", "🎸", 15, 0.2, "#e74c3c"),
            ("piano", "🎹", 25, 0.15, "#2c3e50"),
            ("microphone", "🎤", 50, 0.07, "#d35400"),
            ("headphones", "🎧", 100, 0.02, "#2980b9"),
            ("disc", "💿", 200, 0.01, "#7f8c8d"),
        ],
        "wild": ("wild", "🔊", "#16a085"),
        "scatter": ("scatter", "🎵", "#f39c12"),
    },
    "fantasy": {
        "name": "Fantasy Realm",
        "symbols": [
            ("sword", "⚔️", 5, 0.3, "#95a5a6"),
            ("shield", "🛡️", 10, 0.25, "#7f8c8d"),
            ("bow", "🏹", 15, 0.2, "#8e44ad"),
            ("potion", "⚗️", 25, 0.15, "#16a085"),
            ("wizard", "🧙", 50, 0.07, "#3498db"),
            ("princess", "👸", 100, 0.02, "#f39c12"),
            ("unicorn", "🦄", 200, 0.01, "#9b59b6"),
        ],
        "wild": ("wild", "✨", "#f1c40f"),
        "scatter": ("scatter", "🏰", "#34495e"),
    },
    "astrology": {
        "name": "Astrology Signs",
        "symbols": [
            ("aries", "♈", 5, 0.3, "#ff5722"),
            ("taurus", "♉", 10, 0.25, "#8bc34a"),
            ("gemini", "♊", 15, 0.2, "#ffeb3b"),
            ("cancer", "♋", 25, 0.15, "#03a9f4"),
            ("leo", "♌", 50, 0.07, "#ff9800"),
            ("virgo", "♍", 100, 0.02, "#9c27b0"),
            ("libra", "♎", 200, 0.01, "#2196f3"),
        ],
        "wild": ("wild", "✨", "#e91e63"),
        "scatter": ("scatter", "🔮", "#9c27b0"),
    },
    "weather": {
        "name": "Weather Forecast",
        "symbols": [
            ("sunny", "☀️", 5, 0.3, "#ffeb3b"),
            ("cloudy", "☁️", 10, 0.25, "#b0bec5"),
            ("rain", "🌧️", 15, 0.2, "#2196f3"),
            ("storm", "⚡", 25, 0.15, "#ffc107"),
            ("snow", "❄️", 50, 0.07, "#e1f5fe"),
            ("rainbow", "🌈", 100, 0.02, "#9c27b0"),
            ("tornado", "🌪️", 200, 0.01, "#607d8b"),
        ],
        "wild": ("wild", "🌞", "#ff9800"),
        "scatter": ("scatter", "🌍", "#4caf50"),
    },
    "planets": {
        "name": "Solar System",
        "symbols": [
            ("mercury", "☿", 5, 0.3, "#9e9e9e"),
            ("venus", "♀", 10, 0.25, "#ffeb3b"),
            ("earth", "🌍", 15, 0.2, "#2196f3"),
            ("mars", "♂", 25, 0.15, "#f44336"),
            ("jupiter", "♃", 50, 0.07, "#ff9800"),
            ("saturn", "♄", 100, 0.02, "#ffd54f"),
            ("uranus", "♅", 200, 0.01, "#80deea"),
        ],
        "wild": ("wild", "☀️", "#ffeb3b"),
        "scatter": ("scatter", "⭐", "#e1f5fe"),
    },
    "emoticons": {
        "name": "Emoji Faces",
        "symbols": [
            ("smile", "😊", 5, 0.3, "#ffeb3b"),
            ("laugh", "😂", 10, 0.25, "#2196f3"),
            ("wink", "😉", 15, 0.2, "#ff9800"),
            ("love", "😍", 25, 0.15, "#f44336"),
            ("cool", "😎", 50, 0.07, "#009688"),
            ("surprised", "😮", 100, 0.02, "#9c27b0"),
            ("crazy", "🤪", 200, 0.01, "#673ab7"),
        ],
        "wild": ("wild", "🥳", "#e91e63"),
        "scatter": ("scatter", "🎭", "#3f51b5"),
    },
    "sports": {
        "name": "Sports Arena",
        "symbols": [
            ("soccer", "⚽", 5, 0.3, "#212121"),
            ("basketball", "🏀", 10, 0.25, "#ff5722"),
            ("football", "🏈", 15, 0.2, "#795548"),
            ("tennis", "🎾", 25, 0.15, "#cddc39"),
            ("baseball", "⚾", 50, 0.07, "#607d8b"),
            ("bowling", "🎳", 100, 0.02, "#f44336"),
            ("trophy", "🏆", 200, 0.01, "#ffd700"),
        ],
        "wild": ("wild", "🏅", "#ffc107"),
        "scatter": ("scatter", "🎯", "#4caf50"),
    },
    "tech": {
        "name": "Tech Gadgets",
        "symbols": [
            ("phone", "📱", 5, 0.3, "#9e9e9e"),
            ("laptop", "💻", 10, 0.25, "#3f51b5"),
            ("camera", "📷", 15, 0.2, "#212121"),
            ("game", "🎮", 25, 0.15, "#009688"),
            ("tv", "📺", 50, 0.07, "#607d8b"),
            ("watch", "⌚", 100, 0.02, "#795548"),
            ("robot", "🤖", 200, 0.01, "#9c27b0"),
        ],
        "wild": ("wild", "⚡", "#ff9800"),
        "scatter": ("scatter", "🔌", "#4caf50"),
    },
    "camping": {
        "name": "Wilderness Camp",
        "symbols": [
            ("tent", "⛺", 5, 0.3, "#ff9800"),
            ("tree", "🌲", 10, 0.25, "#4caf50"),
            ("mountain", "⛰️", 15, 0.2, "#795548"),
            ("fire", "🔥", 25, 0.15, "#f44336"),
            ("fish", "🐟", 50, 0.07, "#03a9f4"),
            ("compass", "🧭", 100, 0.02, "#795548"),
            ("backpack", "🎒", 200, 0.01, "#f44336"),
        ],
        "wild": ("wild", "🏕️", "#8d6e63"),
        "scatter": ("scatter", "🌟", "#ffeb3b"),
    },
}
