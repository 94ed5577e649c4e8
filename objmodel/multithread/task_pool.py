# objmodel/multithread/task_pool.py
# ---------------------------------------------------------------
# Пул потоков для пакетной загрузки моделей.
# Каждый вызов загрузчика владеет своим контекстом (пулы, словари
# дедупликации), поэтому общих изменяемых данных у задач нет.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor

class TaskPool:
    """Обёртка над ThreadPoolExecutor; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        return self.executor.submit(fn, *args, **kwargs)

    def map_ordered(self, fn, items):
        """fn(item) для всех items; результаты в порядке входа.

        Первая же ошибка пробрасывается наружу (в порядке входа).
        """
        futures = [self.submit(fn, item) for item in items]
        return [f.result() for f in futures]

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
