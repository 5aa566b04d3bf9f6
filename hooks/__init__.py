from hooks.interceptor import Action, KsuidInterceptor, configure, create_ksuid_middleware

__all__ = ["Action", "KsuidInterceptor", "configure", "create_ksuid_middleware"]
