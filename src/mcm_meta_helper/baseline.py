"""Translation keys supplied by SkyUI itself.

Mods never need to translate these, so they are removed from the required
set before looking for missing keys.  They are *not* removed when looking
for unused keys: a file that defines ``$Armor`` without using it is reported.
"""

from __future__ import annotations

from typing import Iterable

SKYUI_KEYS: frozenset[str] = frozenset(
    {
        "$3D",
        "$AID",
        "$ALL",
        "$AMMO",
        "$ARM",
        "$Active",
        "$Advanced",
        "$Aetherium",
        "$Align",
        "$Alteration",
        "$Amulet",
        "$Armor",
        "$Arrow",
        "$Artifact",
        "$B.ARM",
        "$B.DAM",
        "$BASE",
        "$Barter",
        "$Battleaxe",
        "$Body",
        "$Bolt",
        "$Bonemold",
        "$Book",
        "$Bottom",
        "$Bow",
        "$Brotherhood",
        "$CLASS",
        "$COOLDOWN",
        "$COVR",
        "$Calves",
        "$Category",
        "$Center",
        "$Chitin",
        "$Circlet",
        "$Claw",
        "$Clothing",
        "$Clutter",
        "$Column",
        "$Common",
        "$Confirm",
        "$Container",
        "$Crafting",
        "$Crossbow",
        "$DAM",
        "$DUR",
        "$DURATION",
        "$Daedric",
        "$Dagger",
        "$Dawnguard",
        "$Deathbrand",
        "$Default",
        "$Defaults",
        "$Destruction",
        "$Disable",
        "$Dragonbone",
        "$Dragonplate",
        "$Dragonscale",
        "$Draugr",
        "$Drink",
        "$Dwarven",
        "$EFFECT",
        "$ENCHANTED",
        "$EQUIPPED",
        "$EXPPROT",
        "$EXPPROTLOW",
        "$Ears",
        "$Ebony",
        "$Elven",
        "$Enabled",
        "$Equip",
        "$F.WRMT",
        "$FAVORITE",
        "$FILTER",
        "$FIRST",
        "$FORTIFY",
        "$FSForget",
        "$Falmer",
        "$Favorite",
        "$Favorites",
        "$Feet",
        "$Find",
        "$Firewood",
        "$Font",
        "$Food",
        "$Forearms",
        "$Forsworn",
        "$Fur",
        "$GEAR",
        "$GROUP",
        "$Gem",
        "$General",
        "$Gift",
        "$Glass",
        "$Gold",
        "$Grand",
        "$Greater",
        "$Greatsword",
        "$Group",
        "$Gun",
        "$HNGR",
        "$HUNGER",
        "$Halberd",
        "$Hands",
        "$Head",
        "$Heavy",
        "$Hide",
        "$Horizontal",
        "$House",
        "$Hunter",
        "$IJBag",
        "$IJBracelet",
        "$IJChoker",
        "$IJCrown",
        "$IJEar",
        "$IJEarrings",
        "$IJNecklace",
        "$IJTorc",
        "$Icon",
        "$Illusion",
        "$Imperial",
        "$Ingot",
        "$Ingredient",
        "$Input",
        "$Inventory",
        "$Iron",
        "$Item",
        "$Javelin",
        "$Jewelry",
        "$Katana",
        "$Key",
        "$Leather",
        "$Left",
        "$Lesser",
        "$Light",
        "$Lockpick",
        "$MAG",
        "$MAGNITUDE",
        "$MAT",
        "$MATERIAL",
        "$MCMMenuName",
        "$MOD",
        "$Mace",
        "$Magic",
        "$Magical",
        "$Map",
        "$Mask",
        "$Melee",
        "$Minimum",
        "$Misc",
        "$Morag",
        "$Next",
        "$Nightingale",
        "$None",
        "$Nordic",
        "$Note",
        "$Off",
        "$On",
        "$Open",
        "$Orcish",
        "$Order",
        "$Ore",
        "$Orientation",
        "$Other",
        "$Petty",
        "$Pick",
        "$Pickaxe",
        "$Pike",
        "$Poison",
        "$Potion",
        "$Preferences",
        "$Previous",
        "$Quantity",
        "$Quarterstaff",
        "$R.COLD",
        "$RAINPROT",
        "$RAINPROTLOW",
        "$RCH",
        "$REACH",
        "$RESTORE",
        "$Rapier",
        "$Ready",
        "$Recipe",
        "$Remains",
        "$Remap",
        "$Restoration",
        "$Right",
        "$Ring",
        "$SCHOOL",
        "$SECOND",
        "$SHOUTS",
        "$SKILL",
        "$SKI_INFO1{}",
        "$SKI_INFO2{}",
        "$SKI_INFO3{}",
        "$SKI_INFO4{}",
        "$SKI_INFO5{}",
        "$SKI_INFO6",
        "$SKI_INFO7{}",
        "$SKI_INFO8{}",
        "$SKI_INFO9{}",
        "$SKI_MSG1",
        "$SKI_MSG2{}",
        "$SLOT",
        "$SOURCE",
        "$SPD",
        "$SPEED",
        "$SPELL",
        "$STAGGER",
        "$STGR",
        "$STOLEN",
        "$SWF",
        "$Save",
        "$Scale",
        "$Scaled",
        "$Scroll",
        "$Scythe",
        "$Search",
        "$Select",
        "$Set",
        "$Shield",
        "$Show",
        "$Silver",
        "$Soul",
        "$Spear",
        "$Spell",
        "$Staff",
        "$Stalhrim",
        "$Steel",
        "$Stormcloak",
        "$Strips",
        "$Studded",
        "$Switch",
        "$Sword",
        "$T.WGT",
        "$THIRD",
        "$THIRST",
        "$TIME",
        "$TOTAL",
        "$TRST",
        "$TYPE",
        "$Tail",
        "$Toggle",
        "$Tool",
        "$Top",
        "$Torch",
        "$Toy",
        "$Unequip",
        "$Ungroup",
        "$Unmap",
        "$V/W",
        "$VAL",
        "$VALUE/WEIGHT",
        "$Vampire",
        "$Vertical",
        "$WARMTH",
        "$WEAPONS",
        "$WGT",
        "$WRMT",
        "$War",
        "$Warhammer",
        "$Weapon",
        "$Whip",
        "$Wood",
    }
)


def load_baseline(extra: Iterable[str] = ()) -> frozenset[str]:
    """Return the SkyUI keys plus any project-specific *extra* keys."""
    extra = frozenset(extra)
    if not extra:
        return SKYUI_KEYS
    return SKYUI_KEYS | extra
