from cssrefactor.scaffold.writer import (
    component_template,
    mixins_template,
    render_main,
    write_scaffold,
)

__all__ = ["component_template", "mixins_template", "render_main", "write_scaffold"]
