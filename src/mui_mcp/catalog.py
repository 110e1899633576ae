"""Static Material UI component catalog.

Component names follow the component pages listed in MUI's llms.txt.
Category labels group them by use case and only drive keyword search,
so they may overlap and may mention names that have no page of their own.
"""

from types import MappingProxyType

COMPONENTS: tuple[str, ...] = (
    "Accordion",
    "Alert",
    "App Bar",
    "Autocomplete",
    "Avatar",
    "Backdrop",
    "Badge",
    "Bottom Navigation",
    "Box",
    "Breadcrumbs",
    "Button",
    "Button Group",
    "Card",
    "Checkbox",
    "Chip",
    "Circular Progress",
    "Click Away Listener",
    "Container",
    "CSS Baseline",
    "Dialog",
    "Divider",
    "Drawer",
    "Floating Action Button",
    "Grid",
    "Image List",
    "Linear Progress",
    "Link",
    "List",
    "Masonry",
    "Menu",
    "Modal",
    "Pagination",
    "Paper",
    "Popover",
    "Popper",
    "Portal",
    "Radio Button",
    "Rating",
    "Select",
    "Skeleton",
    "Slider",
    "Snackbar",
    "Speed Dial",
    "Stack",
    "Stepper",
    "Switch",
    "Table",
    "Tabs",
    "Text Field",
    "Textarea Autosize",
    "Timeline",
    "Toggle Button",
    "Tooltip",
    "Transfer List",
    "Tree View",
    "Typography",
)

COMPONENT_MAP: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "form": (
            "Text Field",
            "Select",
            "Checkbox",
            "Radio Button",
            "Switch",
            "Slider",
            "Autocomplete",
            "Toggle Button",
        ),
        "input": ("Text Field", "Autocomplete", "Select", "Textarea Autosize"),
        "button": ("Button", "Floating Action Button", "Button Group", "Toggle Button"),
        "navigation": (
            "App Bar",
            "Bottom Navigation",
            "Breadcrumbs",
            "Drawer",
            "Link",
            "Menu",
            "Stepper",
            "Tabs",
        ),
        "layout": ("Box", "Container", "Grid", "Stack", "Image List", "Masonry"),
        "data": ("Table", "List", "Transfer List", "Tree View", "Pagination"),
        "feedback": (
            "Alert",
            "Backdrop",
            "Dialog",
            "Progress",
            "Circular Progress",
            "Linear Progress",
            "Skeleton",
            "Snackbar",
        ),
        "overlay": ("Modal", "Popover", "Popper", "Tooltip", "Menu", "Drawer", "Dialog"),
        "surface": ("Card", "Paper", "Accordion"),
        "display": ("Avatar", "Badge", "Chip", "Divider", "Typography", "Timeline"),
        "selection": ("Checkbox", "Radio Button", "Select", "Switch", "Autocomplete"),
        "notification": ("Alert", "Snackbar"),
        "loading": ("Circular Progress", "Linear Progress", "Skeleton", "Backdrop"),
        "utility": ("Click Away Listener", "CSS Baseline", "Portal", "No SSR"),
    }
)

# Labels quoted back to the caller when a search finds nothing
SUGGESTED_CATEGORIES: tuple[str, ...] = (
    "form",
    "navigation",
    "overlay",
    "feedback",
    "data",
    "layout",
    "input",
    "button",
)
