"""Theme engine: color math, validation, presets and CSS generation.

Import from the submodules directly (`storefront.theme.colors`,
`storefront.theme.css`, ...); this package stays import-light because
`storefront.models.schemas` depends on `storefront.theme.constants`.
"""
