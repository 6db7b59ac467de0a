import enum


class ProjectType(str, enum.Enum):
    KITCHEN_REMODEL = "kitchen-remodel"
    BATHROOM_REMODEL = "bathroom-remodel"
    HOME_ADDITION = "home-addition"
    DECK_CONSTRUCTION = "deck-construction"
    FLOORING_INSTALLATION = "flooring-installation"
    ROOFING_REPLACEMENT = "roofing-replacement"
    SIDING_INSTALLATION = "siding-installation"


class MaterialQuality(str, enum.Enum):
    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class ExpenseCategory(str, enum.Enum):
    MATERIALS = "Materials"
    LABOR = "Labor"
    PERMITS = "Permits"
    SUBS = "Subs"
    MISC = "Misc"
