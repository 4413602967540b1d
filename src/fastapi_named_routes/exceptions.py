"""Exception hierarchy for named route table errors."""


class NamedRoutingError(Exception):
    """Root of every error raised while building or publishing a route table.

    register(), the table filters and the FastAPI adapter only ever
    raise subclasses of this class, so one except clause around route
    table setup is enough.

    Example:
        try:
            register(route_table, ["article"], ["/article"])
        except NamedRoutingError as e:
            logger.error(f"Failed to build route table: {e}")
    """


class DuplicateRouteNameError(NamedRoutingError):
    """Raised when a route name is registered twice with different patterns.

    Registering the same name again with the identical pattern is
    allowed. A conflicting pattern means two route declarations claim
    the same dotted name, which is a configuration defect.

    Example:
        DuplicateRouteNameError(
            "Duplicate route name 'article.detail': "
            "'/article/:slug' conflicts with '/post/:slug'"
        )
    """


class MalformedPatternError(NamedRoutingError):
    """Raised when a joined path does not follow the named route grammar.

    A valid pattern is either '/' or one or more '/segment' groups, where
    a segment consists of alphanumerics, dashes, underscores or dots,
    optionally prefixed with ':' to mark a parameter.

    Examples of malformed patterns:
        - Trailing bare colon: /foo/:
        - Empty segment: /foo//bar
        - Missing leading slash: foo/bar

    Example:
        MalformedPatternError("Generated pattern is malformed: '/foo/:'")
    """


class RouteFilterError(NamedRoutingError):
    """Raised when route filter configuration is invalid.

    This exception is raised when both include and exclude filters
    are provided simultaneously.

    Example:
        RouteFilterError(
            "Cannot specify both include and exclude filters: "
            "include=['article'], exclude=['admin']"
        )
    """


class ParameterNameConflictError(NamedRoutingError):
    """Raised when a route cannot be published because its parameters clash.

    FastAPI needs every path parameter of a route to have a distinct
    identifier. A pattern that repeats a parameter, or whose parameter
    names only differ in characters that become underscores, is a valid
    named route but cannot be expressed as a FastAPI path.

    Example:
        ParameterNameConflictError(
            "Route 'product.detail' ('/x/:a-b/:a_b') has parameters "
            "that clash as FastAPI parameter 'a_b': ':a-b', ':a_b'"
        )
    """
