from snipshare_executor.models import ExecutionResult


def format_report(result: ExecutionResult) -> str:
    """Render a result the way the editor's output panel shows it."""
    if result.success:
        return f"✅ Execution Successful\nTime: {result.elapsed_time}\nMemory: {result.memory}\n\n{result.output}"
    return f"❌ Execution Failed\n\n{result.error}"
