"""Click option class for mode flags that exclude each other."""
import click


class ExclusiveFlagOption(click.Option):
    """Click flag that may not be combined with the flags it names.

    Pass exclusive_with=[...] with the parameter names of the other flags.
    """

    def __init__(self, *args, **kwargs):
        self.exclusive_with = kwargs.pop("exclusive_with", [])
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        if self.name in opts:
            clashes = [other for other in self.exclusive_with if other in opts]
            if clashes:
                raise click.UsageError(
                    f"Option --{self.name} cannot be used with --{clashes[0]}",
                    ctx=ctx,
                )
        return super().handle_parse_result(ctx, opts, args)
