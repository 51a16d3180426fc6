"""Reference table for color naming.

Table order matters: when two entries are equally close to a query color the
earlier one wins. CSS named colors come first, followed by common design,
paint and pigment names.
"""

from __future__ import annotations

from typing import Tuple

NAMED_COLORS: Tuple[Tuple[str, str], ...] = (
    # CSS Color Module Level 4 keywords
    ("Black", "#000000"),
    ("White", "#ffffff"),
    ("Red", "#ff0000"),
    ("Lime", "#00ff00"),
    ("Blue", "#0000ff"),
    ("Yellow", "#ffff00"),
    ("Cyan", "#00ffff"),
    ("Aqua", "#00ffff"),
    ("Magenta", "#ff00ff"),
    ("Fuchsia", "#ff00ff"),
    ("Silver", "#c0c0c0"),
    ("Gray", "#808080"),
    ("Grey", "#808080"),
    ("Maroon", "#800000"),
    ("Olive", "#808000"),
    ("Green", "#008000"),
    ("Purple", "#800080"),
    ("Teal", "#008080"),
    ("Navy", "#000080"),
    ("Alice Blue", "#f0f8ff"),
    ("Antique White", "#faebd7"),
    ("Aquamarine", "#7fffd4"),
    ("Azure", "#f0ffff"),
    ("Beige", "#f5f5dc"),
    ("Bisque", "#ffe4c4"),
    ("Blanched Almond", "#ffebcd"),
    ("Blue Violet", "#8a2be2"),
    ("Brown", "#a52a2a"),
    ("Burlywood", "#deb887"),
    ("Cadet Blue", "#5f9ea0"),
    ("Chartreuse", "#7fff00"),
    ("Chocolate", "#d2691e"),
    ("Coral", "#ff7f50"),
    ("Cornflower Blue", "#6495ed"),
    ("Cornsilk", "#fff8dc"),
    ("Crimson", "#dc143c"),
    ("Dark Blue", "#00008b"),
    ("Dark Cyan", "#008b8b"),
    ("Dark Goldenrod", "#b8860b"),
    ("Dark Gray", "#a9a9a9"),
    ("Dark Green", "#006400"),
    ("Dark Khaki", "#bdb76b"),
    ("Dark Magenta", "#8b008b"),
    ("Dark Olive Green", "#556b2f"),
    ("Dark Orange", "#ff8c00"),
    ("Dark Orchid", "#9932cc"),
    ("Dark Red", "#8b0000"),
    ("Dark Salmon", "#e9967a"),
    ("Dark Sea Green", "#8fbc8f"),
    ("Dark Slate Blue", "#483d8b"),
    ("Dark Slate Gray", "#2f4f4f"),
    ("Dark Turquoise", "#00ced1"),
    ("Dark Violet", "#9400d3"),
    ("Deep Pink", "#ff1493"),
    ("Deep Sky Blue", "#00bfff"),
    ("Dim Gray", "#696969"),
    ("Dodger Blue", "#1e90ff"),
    ("Firebrick", "#b22222"),
    ("Floral White", "#fffaf0"),
    ("Forest Green", "#228b22"),
    ("Gainsboro", "#dcdcdc"),
    ("Ghost White", "#f8f8ff"),
    ("Gold", "#ffd700"),
    ("Goldenrod", "#daa520"),
    ("Green Yellow", "#adff2f"),
    ("Honeydew", "#f0fff0"),
    ("Hot Pink", "#ff69b4"),
    ("Indian Red", "#cd5c5c"),
    ("Indigo", "#4b0082"),
    ("Ivory", "#fffff0"),
    ("Khaki", "#f0e68c"),
    ("Lavender", "#e6e6fa"),
    ("Lavender Blush", "#fff0f5"),
    ("Lawn Green", "#7cfc00"),
    ("Lemon Chiffon", "#fffacd"),
    ("Light Blue", "#add8e6"),
    ("Light Coral", "#f08080"),
    ("Light Cyan", "#e0ffff"),
    ("Light Goldenrod Yellow", "#fafad2"),
    ("Light Gray", "#d3d3d3"),
    ("Light Green", "#90ee90"),
    ("Light Pink", "#ffb6c1"),
    ("Light Salmon", "#ffa07a"),
    ("Light Sea Green", "#20b2aa"),
    ("Light Sky Blue", "#87cefa"),
    ("Light Slate Gray", "#778899"),
    ("Light Steel Blue", "#b0c4de"),
    ("Light Yellow", "#ffffe0"),
    ("Lime Green", "#32cd32"),
    ("Linen", "#faf0e6"),
    ("Medium Aquamarine", "#66cdaa"),
    ("Medium Blue", "#0000cd"),
    ("Medium Orchid", "#ba55d3"),
    ("Medium Purple", "#9370db"),
    ("Medium Sea Green", "#3cb371"),
    ("Medium Slate Blue", "#7b68ee"),
    ("Medium Spring Green", "#00fa9a"),
    ("Medium Turquoise", "#48d1cc"),
    ("Medium Violet Red", "#c71585"),
    ("Midnight Blue", "#191970"),
    ("Mint Cream", "#f5fffa"),
    ("Misty Rose", "#ffe4e1"),
    ("Moccasin", "#ffe4b5"),
    ("Navajo White", "#ffdead"),
    ("Old Lace", "#fdf5e6"),
    ("Olive Drab", "#6b8e23"),
    ("Orange", "#ffa500"),
    ("Orange Red", "#ff4500"),
    ("Orchid", "#da70d6"),
    ("Pale Goldenrod", "#eee8aa"),
    ("Pale Green", "#98fb98"),
    ("Pale Turquoise", "#afeeee"),
    ("Pale Violet Red", "#db7093"),
    ("Papaya Whip", "#ffefd5"),
    ("Peach Puff", "#ffdab9"),
    ("Peru", "#cd853f"),
    ("Pink", "#ffc0cb"),
    ("Plum", "#dda0dd"),
    ("Powder Blue", "#b0e0e6"),
    ("Rebecca Purple", "#663399"),
    ("Rosy Brown", "#bc8f8f"),
    ("Royal Blue", "#4169e1"),
    ("Saddle Brown", "#8b4513"),
    ("Salmon", "#fa8072"),
    ("Sandy Brown", "#f4a460"),
    ("Sea Green", "#2e8b57"),
    ("Seashell", "#fff5ee"),
    ("Sienna", "#a0522d"),
    ("Sky Blue", "#87ceeb"),
    ("Slate Blue", "#6a5acd"),
    ("Slate Gray", "#708090"),
    ("Snow", "#fffafa"),
    ("Spring Green", "#00ff7f"),
    ("Steel Blue", "#4682b4"),
    ("Tan", "#d2b48c"),
    ("Thistle", "#d8bfd8"),
    ("Tomato", "#ff6347"),
    ("Turquoise", "#40e0d0"),
    ("Violet", "#ee82ee"),
    ("Wheat", "#f5deb3"),
    ("White Smoke", "#f5f5f5"),
    ("Yellow Green", "#9acd32"),
    # Design, paint and pigment names
    ("Absolute Zero", "#0048ba"),
    ("Acid Green", "#b0bf1a"),
    ("Alabaster", "#edeae0"),
    ("Alizarin Crimson", "#e32636"),
    ("Almond", "#efdecd"),
    ("Amaranth", "#e52b50"),
    ("Amber", "#ffbf00"),
    ("Amethyst", "#9966cc"),
    ("Apple Green", "#8db600"),
    ("Apricot", "#fbceb1"),
    ("Army Green", "#4b5320"),
    ("Arsenic", "#3b444b"),
    ("Ash Gray", "#b2beb5"),
    ("Asparagus", "#87a96b"),
    ("Auburn", "#a52a2a"),
    ("Avocado", "#568203"),
    ("Baby Blue", "#89cff0"),
    ("Baby Pink", "#f4c2c2"),
    ("Banana Yellow", "#ffe135"),
    ("Battleship Gray", "#848482"),
    ("Beaver", "#9f8170"),
    ("Bistre", "#3d2b1f"),
    ("Bittersweet", "#fe6f5e"),
    ("Bleu de France", "#318ce7"),
    ("Blond", "#faf0be"),
    ("Blue Gray", "#6699cc"),
    ("Blush", "#de5d83"),
    ("Bole", "#79443b"),
    ("Bondi Blue", "#0095b6"),
    ("Bone", "#e3dac9"),
    ("Bottle Green", "#006a4e"),
    ("Brandeis Blue", "#0070ff"),
    ("Brick Red", "#cb4154"),
    ("Bright Green", "#66ff00"),
    ("Bright Lavender", "#bf94e4"),
    ("Bright Pink", "#ff007f"),
    ("Bright Turquoise", "#08e8de"),
    ("Brilliant Rose", "#ff55a3"),
    ("British Racing Green", "#004225"),
    ("Bronze", "#cd7f32"),
    ("Bubble Gum", "#ffc1cc"),
    ("Buff", "#f0dc82"),
    ("Burgundy", "#800020"),
    ("Burnt Orange", "#cc5500"),
    ("Burnt Sienna", "#e97451"),
    ("Burnt Umber", "#8a3324"),
    ("Byzantium", "#702963"),
    ("Cadmium Green", "#006b3c"),
    ("Cadmium Orange", "#ed872d"),
    ("Cadmium Red", "#e30022"),
    ("Cadmium Yellow", "#fff600"),
    ("Cambridge Blue", "#a3c1ad"),
    ("Camel", "#c19a6b"),
    ("Canary Yellow", "#ffef00"),
    ("Candy Apple Red", "#ff0800"),
    ("Caput Mortuum", "#592720"),
    ("Cardinal", "#c41e3a"),
    ("Caribbean Green", "#00cc99"),
    ("Carmine", "#960018"),
    ("Carnation Pink", "#ffa6c9"),
    ("Carolina Blue", "#56a0d3"),
    ("Carrot Orange", "#ed9121"),
    ("Celadon", "#ace1af"),
    ("Celeste", "#b2ffff"),
    ("Cerise", "#de3163"),
    ("Cerulean", "#007ba7"),
    ("Champagne", "#f7e7ce"),
    ("Charcoal", "#36454f"),
    ("Cherry Blossom Pink", "#ffb7c5"),
    ("Chestnut", "#954535"),
    ("Chili Red", "#e23d28"),
    ("Cinnabar", "#e34234"),
    ("Cinnamon", "#d2691e"),
    ("Citrine", "#e4d00a"),
    ("Claret", "#7f1734"),
    ("Cobalt Blue", "#0047ab"),
    ("Cocoa Brown", "#d2691e"),
    ("Coffee", "#6f4e37"),
    ("Columbia Blue", "#c4d8e2"),
    ("Copper", "#b87333"),
    ("Coral Pink", "#f88379"),
    ("Cordovan", "#893f45"),
    ("Cosmic Latte", "#fff8e7"),
    ("Cream", "#fffdd0"),
    ("Cyber Yellow", "#ffd300"),
    ("Daffodil", "#ffff31"),
    ("Dandelion", "#f0e130"),
    ("Dark Brown", "#654321"),
    ("Dark Chocolate", "#490206"),
    ("Dark Coral", "#cd5b45"),
    ("Dark Lavender", "#734f96"),
    ("Dark Pastel Green", "#03c03c"),
    ("Dark Pink", "#e75480"),
    ("Dark Sienna", "#3c1414"),
    ("Dark Tan", "#918151"),
    ("Dark Teal", "#014d4e"),
    ("Deep Carmine", "#a9203e"),
    ("Deep Champagne", "#fad6a5"),
    ("Deep Saffron", "#ff9933"),
    ("Denim", "#1560bd"),
    ("Desert Sand", "#edc9af"),
    ("Dusty Rose", "#dcae96"),
    ("Ebony", "#555d50"),
    ("Ecru", "#c2b280"),
    ("Eggplant", "#614051"),
    ("Eggshell", "#f0ead6"),
    ("Electric Blue", "#7df9ff"),
    ("Electric Indigo", "#6f00ff"),
    ("Electric Lime", "#ccff00"),
    ("Electric Purple", "#bf00ff"),
    ("Emerald", "#50c878"),
    ("Eminence", "#6c3082"),
    ("Fern Green", "#4f7942"),
    ("Field Drab", "#6c541e"),
    ("Flame", "#e25822"),
    ("Flax", "#eedc82"),
    ("Folly", "#ff004f"),
    ("French Blue", "#0072bb"),
    ("French Rose", "#f64a8a"),
    ("Fuchsia Pink", "#ff77ff"),
    ("Gamboge", "#e49b0f"),
    ("Glaucous", "#6082b6"),
    ("Golden Brown", "#996515"),
    ("Golden Yellow", "#ffdf00"),
    ("Granny Smith Apple", "#a8e4a0"),
    ("Grape", "#6f2da8"),
    ("Gunmetal", "#2a3439"),
    ("Harlequin", "#3fff00"),
    ("Harvest Gold", "#da9100"),
    ("Heliotrope", "#df73ff"),
    ("Hunter Green", "#355e3b"),
    ("Iceberg", "#71a6d2"),
    ("Icterine", "#fcf75e"),
    ("Imperial Blue", "#002395"),
    ("Inchworm", "#b2ec5d"),
    ("India Green", "#138808"),
    ("International Klein Blue", "#002fa7"),
    ("International Orange", "#ff4f00"),
    ("Iris", "#5a4fcf"),
    ("Isabelline", "#f4f0ec"),
    ("Jade", "#00a86b"),
    ("Jasmine", "#f8de7e"),
    ("Jazzberry Jam", "#a50b5e"),
    ("Jet", "#343434"),
    ("Jonquil", "#f4ca16"),
    ("Kelly Green", "#4cbb17"),
    ("Languid Lavender", "#d6cadd"),
    ("Lapis Lazuli", "#26619c"),
    ("Lemon", "#fff700"),
    ("Lemon Lime", "#e3ff00"),
    ("Liberty", "#545aa7"),
    ("Light Apricot", "#fdd5b1"),
    ("Light Brown", "#b5651d"),
    ("Light Carmine Pink", "#e66771"),
    ("Light Orange", "#fed8b1"),
    ("Lilac", "#c8a2c8"),
    ("Lime Yellow", "#bfff00"),
    ("Lincoln Green", "#195905"),
    ("Liver", "#674c47"),
    ("Magenta Haze", "#9f4576"),
    ("Magic Mint", "#aaf0d1"),
    ("Magnolia", "#f8f4ff"),
    ("Mahogany", "#c04000"),
    ("Maize", "#fbec5d"),
    ("Malachite", "#0bda51"),
    ("Mango", "#fdbe02"),
    ("Mantis", "#74c365"),
    ("Mauve", "#e0b0ff"),
    ("Mauve Taupe", "#915f6d"),
    ("Maya Blue", "#73c2fb"),
    ("Medium Champagne", "#f3e5ab"),
    ("Melon", "#fdbcb4"),
    ("Midnight Green", "#004953"),
    ("Mint", "#3eb489"),
    ("Mint Green", "#98ff98"),
    ("Moss Green", "#8a9a5b"),
    ("Mountbatten Pink", "#997a8d"),
    ("Mulberry", "#c54b8c"),
    ("Mustard", "#ffdb58"),
    ("Myrtle Green", "#317873"),
    ("Naples Yellow", "#fada5e"),
    ("Navy Blue", "#000080"),
    ("Neon Green", "#39ff14"),
    ("Non-Photo Blue", "#a4dded"),
    ("Ocean Blue", "#4f42b5"),
    ("Ochre", "#cc7722"),
    ("Old Gold", "#cfb53b"),
    ("Old Rose", "#c08081"),
    ("Olivine", "#9ab973"),
    ("Onyx", "#353839"),
    ("Orange Peel", "#ff9f00"),
    ("Oxford Blue", "#002147"),
    ("Oxblood", "#4a0000"),
    ("Pacific Blue", "#1ca9c9"),
    ("Pastel Blue", "#aec6cf"),
    ("Pastel Green", "#77dd77"),
    ("Pastel Orange", "#ffb347"),
    ("Pastel Pink", "#dea5a4"),
    ("Pastel Purple", "#b39eb5"),
    ("Pastel Red", "#ff6961"),
    ("Pastel Yellow", "#fdfd96"),
    ("Peach", "#ffe5b4"),
    ("Pear", "#d1e231"),
    ("Pearl", "#eae0c8"),
    ("Periwinkle", "#ccccff"),
    ("Persian Blue", "#1c39bb"),
    ("Persian Green", "#00a693"),
    ("Persian Red", "#cc3333"),
    ("Persimmon", "#ec5800"),
    ("Pewter", "#8ba8b7"),
    ("Phthalo Blue", "#000f89"),
    ("Phthalo Green", "#123524"),
    ("Pine Green", "#01796f"),
    ("Pistachio", "#93c572"),
    ("Platinum", "#e5e4e2"),
    ("Plum Purple", "#8e4585"),
    ("Prussian Blue", "#003153"),
    ("Puce", "#cc8899"),
    ("Pumpkin", "#ff7518"),
    ("Purple Heart", "#69359c"),
    ("Quartz", "#51484f"),
    ("Racing Red", "#bd162c"),
    ("Raspberry", "#e30b5c"),
    ("Raw Sienna", "#d68a59"),
    ("Raw Umber", "#826644"),
    ("Razzmatazz", "#e3256b"),
    ("Red Orange", "#ff5349"),
    ("Red Violet", "#c71585"),
    ("Rose", "#ff007f"),
    ("Rose Gold", "#b76e79"),
    ("Rose Pink", "#ff66cc"),
    ("Rose Quartz", "#aa98a9"),
    ("Rosewood", "#65000b"),
    ("Ruby", "#e0115f"),
    ("Rust", "#b7410e"),
    ("Saffron", "#f4c430"),
    ("Sage", "#bcb88a"),
    ("Sand", "#c2b280"),
    ("Sangria", "#92000a"),
    ("Sapphire", "#0f52ba"),
    ("Scarlet", "#ff2400"),
    ("Sea Blue", "#006994"),
    ("Sepia", "#704214"),
    ("Shamrock Green", "#009e60"),
    ("Shocking Pink", "#fc0fc0"),
    ("Slate", "#708090"),
    ("Smalt", "#003399"),
    ("Smoky Black", "#100c08"),
    ("Spring Bud", "#a7fc00"),
    ("Steel Gray", "#71797e"),
    ("Straw", "#e4d96f"),
    ("Sunglow", "#ffcc33"),
    ("Sunset Orange", "#fd5e53"),
    ("Tangerine", "#f28500"),
    ("Taupe", "#483c32"),
    ("Tea Green", "#d0f0c0"),
    ("Tea Rose", "#f4c2c2"),
    ("Terra Cotta", "#e2725b"),
    ("Tiffany Blue", "#0abab5"),
    ("Titanium White", "#fdfdfd"),
    ("Topaz", "#ffc87c"),
    ("True Blue", "#0073cf"),
    ("Tuscan Red", "#7c4848"),
    ("Tyrian Purple", "#66023c"),
    ("Ultramarine", "#3f00ff"),
    ("Umber", "#635147"),
    ("Vanilla", "#f3e5ab"),
    ("Vermilion", "#e34234"),
    ("Veronica", "#a020f0"),
    ("Violet Blue", "#324ab2"),
    ("Viridian", "#40826d"),
    ("Vivid Violet", "#9f00ff"),
    ("Walnut Brown", "#5c5248"),
    ("Wenge", "#645452"),
    ("Wine", "#722f37"),
    ("Wisteria", "#c9a0dc"),
    ("Xanadu", "#738678"),
    ("Yale Blue", "#0f4d92"),
    ("Zaffre", "#0014a8"),
    ("Zinnwaldite Brown", "#2c1608"),
)

__all__ = ["NAMED_COLORS"]
