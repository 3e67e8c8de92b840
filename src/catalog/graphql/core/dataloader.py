"""Base dataloader class all dataloaders should inherit from"""
import aiodataloader


class DataLoader(aiodataloader.DataLoader):
    """
    Dataloaders are cached at request level: only one instance of a given
    dataloader exists per request, stored in the request context under
    ``context_key``. A new context is created on every request.
    """

    context_key = None
    context = None
    get_cache_key_fn = lambda self, x: x  # noqa: E731

    def __new__(cls, context):
        key = cls.context_key
        if key is None:
            raise TypeError(f"Data loader {cls} does not define context key")
        loaders = context.setdefault("dataloaders", {})
        if key not in loaders:
            loaders[key] = super().__new__(cls)
        return loaders[key]

    def __init__(self, context, *args, **kwargs):
        """Only initialise once per context"""
        if self.context is not context:
            self.context = context
            kwargs["get_cache_key"] = self.get_cache_key_fn
            super().__init__(*args, **kwargs)

    async def batch_load_fn(self, keys):
        raise NotImplementedError
