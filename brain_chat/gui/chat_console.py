import asyncio
import threading
import tkinter as tk
from tkinter import scrolledtext

from brain_chat.api.service import (
    get_default_agent,
    get_default_refresher,
    get_display_counters,
)
from brain_chat.domain.conversation import QUICK_ACTIONS, QuickAction


class App:
    def __init__(self, root):
        self.root = root
        self.root.title("Your Second Brain")
        self.agent = get_default_agent()
        self.refresher = get_default_refresher()
        # 所有协程都跑在同一个后台事件循环里，结果用 root.after 回到 UI 线程
        self.loop = asyncio.new_event_loop()
        threading.Thread(target=self.loop.run_forever, daemon=True).start()

        tk.Label(root, text="Ask me anything about your thoughts and projects").pack(anchor=tk.W)
        self.chat = scrolledtext.ScrolledText(root, width=90, height=24, wrap=tk.WORD)
        self.chat.pack(fill=tk.BOTH, expand=True)
        self.chat.tag_config("user", foreground="#8b5cf6")
        self.chat.tag_config("assistant", foreground="#1f2937")
        self.chat.tag_config("system", foreground="#6b7280")
        self.chat.tag_config("error", foreground="#d93025")

        self.suggestions = tk.Frame(root)
        self.suggestions.pack(fill=tk.X)
        tk.Label(self.suggestions, text="Try asking me something like:").pack(anchor=tk.W)
        for action in QUICK_ACTIONS:
            tk.Button(
                self.suggestions,
                text=f"→ {action.description}",
                anchor=tk.W,
                command=lambda a=action: self.on_quick_action(a),
            ).pack(fill=tk.X)

        row = tk.Frame(root)
        row.pack(fill=tk.X)
        self.entry = tk.Entry(row)
        self.entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.entry.bind("<Return>", self.on_send_event)
        self.send_btn = tk.Button(row, text="Ask", command=self.on_send)
        self.send_btn.pack(side=tk.LEFT)
        self.status = tk.Label(root, text="")
        self.status.pack(fill=tk.X)
        self.footer = tk.Label(root, text="")
        self.footer.pack(fill=tk.X)

        self.loop.call_soon_threadsafe(self.refresher.start)
        self.refresh_footer()

    def _run(self, coro):
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        future.add_done_callback(lambda f: self.root.after(0, self.render))
        self.render()

    def on_send(self):
        # 会话状态只在事件循环线程中修改，这里把文本直接交给 submit
        text = self.entry.get()
        if self.agent.pending or not text.strip():
            return
        self._run(self.agent.submit(text))

    def on_send_event(self, event):
        self.on_send()
        return "break"

    def on_quick_action(self, action: QuickAction):
        self._run(self.agent.apply_quick_action(action))

    def render(self):
        if not self.agent.suggestions_visible:
            self.suggestions.pack_forget()
        self.chat.delete(1.0, tk.END)
        for entry in self.agent.transcript:
            tag = "error" if entry.is_error else entry.role
            prefix = "You" if entry.role == "user" else "Brain"
            self.chat.insert(tk.END, f"{prefix}: {entry.content}\n\n", tag)
        if self.agent.pending:
            self.chat.insert(tk.END, "Thinking...\n", "system")
        self.chat.see(tk.END)
        # disabled 状态下 Entry 不接受修改，先恢复再写入
        self.entry.config(state=tk.NORMAL)
        self.entry.delete(0, tk.END)
        self.entry.insert(0, self.agent.draft)
        busy = tk.DISABLED if self.agent.pending else tk.NORMAL
        self.entry.config(state=busy)
        self.send_btn.config(state=busy)
        self.status.config(text="Thinking..." if self.agent.pending else "")

    def refresh_footer(self):
        counters = get_display_counters()
        self.footer.config(text=f"Powered by your Brain API • {counters['active_threads']} active threads")
        self.root.after(5000, self.refresh_footer)


if __name__ == "__main__":
    root = tk.Tk()
    app = App(root)
    root.mainloop()
